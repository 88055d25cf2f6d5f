# Helpers for inspecting untrusted JSON values.
# Author: Shibo Li
# Date: 2025-06-24
# Version: 0.1.0

import math
from typing import Any


def is_truthy(value: Any) -> bool:
    """
    Truthiness as JSON clients see it: null, false, 0, NaN and "" are falsy.
    Every object and array is truthy, even when empty.
    """
    if value is None or value is False:
        return False
    if isinstance(value, (dict, list)):
        return True
    if isinstance(value, float) and math.isnan(value):
        return False
    if isinstance(value, (int, float, str)):
        return bool(value)
    return True
