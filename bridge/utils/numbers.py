# Helpers for rendering numeric tool results as text.
# Author: Shibo Li
# Date: 2025-06-20
# Version: 0.2.0

import math
from decimal import Decimal
from typing import Union

Number = Union[int, float]


def format_number(value: Number) -> str:
    """
    Renders a number the way JSON clients print it.

    Integral values have no trailing '.0'. Non-finite values read 'Infinity',
    '-Infinity' or 'NaN'. Plain notation is used from 1e-6 up to below 1e21,
    exponent notation outside that range ('1e-7', '1.5e+21').
    """
    if isinstance(value, bool):
        value = int(value)
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    # repr gives the shortest digits that round-trip.
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped

    # value == 0.<digits> * 10**point
    point = len(digits) + exponent
    if len(digits) <= point <= 21:
        text = digits + "0" * (point - len(digits))
    elif 0 < point <= 21:
        text = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        text = "0." + "0" * -point + digits
    else:
        power = point - 1
        mantissa = digits if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"
    return sign + text
