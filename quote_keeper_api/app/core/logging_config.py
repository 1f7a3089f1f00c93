"""
Logging configuration for the Quote Keeper API.

``setup_logging`` configures the root logger from the ``LOG_LEVEL`` and
``LOG_FILE`` settings: a console handler always, and a file handler
when ``log_file`` is set.  Log records include the timestamp, logger
name, level and message.  Logging is set up once per process; later
calls (tests, repeated ``create_app`` calls) leave the existing
handlers in place.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import Settings, settings as default_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its numeric value.

    Unknown names fall back to ``INFO``.
    """
    value = getattr(logging, level.upper(), None)
    return value if isinstance(value, int) else logging.INFO


def setup_logging(app_settings: Optional[Settings] = None) -> None:
    """Configure the root logger from ``app_settings``.

    Parameters
    ----------
    app_settings : Optional[Settings]
        Source of ``log_level`` and ``log_file``; defaults to the
        module-level settings.
    """
    app_settings = app_settings or default_settings
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(resolve_level(app_settings.log_level))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if app_settings.log_file:
        file_handler = logging.FileHandler(Path(app_settings.log_file).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    logging.getLogger(__name__).debug(
        "Logging configured for %s (level=%s, file=%s)",
        app_settings.project_name,
        app_settings.log_level,
        app_settings.log_file or "-",
    )
