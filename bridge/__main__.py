# Command-line entry point: serves the bridge application with uvicorn.
# Author: Shibo Li
# Date: 2025-06-20
# Version: 0.1.0

import uvicorn

from bridge.core.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run(
        "bridge.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
