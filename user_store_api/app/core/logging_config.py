"""
Logging configuration for the User Store API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger and sets the level of the ``user_store_api``
logger hierarchy.  The root level is left alone, so third‑party
libraries keep their own verbosity while every module of this service
logs at the configured level.

The handlers installed here are tagged with a name starting with
``HANDLER_PREFIX``.  Setup is skipped when such a handler is already
present, which makes repeated ``create_app`` calls harmless and still
lets the service add its handlers when something else (uvicorn, pytest)
has already put its own on the root logger.
"""

import logging
from pathlib import Path
from typing import List, Optional

PACKAGE_LOGGER = "user_store_api"
HANDLER_PREFIX = "user_store_api."

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def service_handlers(logger: Optional[logging.Logger] = None) -> List[logging.Handler]:
    """Return the handlers on ``logger`` (root by default) installed by ``setup_logging``."""
    logger = logger or logging.getLogger()
    return [h for h in logger.handlers if (h.get_name() or "").startswith(HANDLER_PREFIX)]


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure logging for the service.

    Parameters
    ----------
    level : str
        Level name applied to the ``user_store_api`` logger (e.g.
        ``"DEBUG"``).  Case insensitive; unknown names fall back to
        ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted or empty, only
        the console handler is added.
    """
    root = logging.getLogger()
    if service_handlers(root):
        return

    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.set_name(HANDLER_PREFIX + "console")
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.set_name(HANDLER_PREFIX + "file")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
