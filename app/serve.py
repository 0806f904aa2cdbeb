"""
Process entry point: run the API with uvicorn on HOST:PORT from settings.

  python -m app.serve
"""

import sys

import uvicorn

from app.core.config import get_settings
from app.core.logging import configure_logging


def main() -> int:
    settings = get_settings()
    configure_logging()
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.APP_ENV == "dev" and settings.DEBUG,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
