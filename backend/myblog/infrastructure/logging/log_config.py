"""Logging setup for the blog API process.

The app logs through module loggers (``logging.getLogger(__name__)``).
``setup_logging()`` runs once from the FastAPI lifespan. It sets the root
level and gives a bare process (tests, the ``myblog`` script before uvicorn
takes over) a stderr handler. It also tunes three groups separately: the
pymongo driver, which is chatty at DEBUG, uvicorn's access log, and the CRUD
repositories, whose storage failures are logged with tracebacks.
"""

import logging
import sys

from myblog.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Settings field -> loggers whose level it controls
_LOGGER_GROUPS: dict[str, tuple[str, ...]] = {
    "log_level_mongodb": ("pymongo", "pymongo.command", "pymongo.connection", "pymongo.serverSelection"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_storage": ("myblog.infrastructure.database",),
}


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply the configured levels and return them keyed by logger name."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_level_from_name(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    applied: dict[str, int] = {}
    for field_name, logger_names in _LOGGER_GROUPS.items():
        level = _level_from_name(getattr(settings, field_name))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)
            applied[name] = level

    logging.getLogger(__name__).debug("log levels applied: %s", applied)
    return applied


def _level_from_name(name: str) -> int:
    """``"warning"`` -> ``logging.WARNING``; unknown names fall back to INFO."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO
