"""Root logger setup shared by the API process and the CLI scripts."""

import logging
import sys

from app.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%SZ"


def configure_logging(level: str | None = None) -> None:
    """
    Configure the root logger. Safe to call more than once: existing root
    handlers are replaced, so Alembic's fileConfig or a second startup does
    not duplicate output.
    """
    resolved = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))

    root = logging.getLogger()
    root.setLevel(resolved)
    root.handlers.clear()
    root.addHandler(handler)

    # Routes log what matters; per-request access lines are noise.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
