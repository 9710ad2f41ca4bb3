"""
Logging setup for the QuickWash API and its maintenance scripts.

``setup_logging`` takes the application ``Settings`` and attaches a
console handler, plus a file handler when ``LOG_FILE`` is set, to the
root logger.  The handlers are named so that calling it again (from a
second ``create_app`` or from ``seed_services.py``) adjusts the level
instead of duplicating output.  Uvicorn's per-request access lines are
kept at warning level unless ``ACCESS_LOG`` is enabled.
"""

import logging
from pathlib import Path

from .config import Settings, settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER = "quickwash.console"
FILE_HANDLER = "quickwash.file"


def _named_handler(logger: logging.Logger, name: str):
    for handler in logger.handlers:
        if handler.get_name() == name:
            return handler
    return None


def setup_logging(config: Settings = settings) -> logging.Logger:
    """Configure the root logger from ``config`` and return it.

    ``config.log_level`` is a level name such as ``"DEBUG"`` (case
    insensitive, unknown names fall back to ``INFO``).  A non-empty
    ``config.log_file`` adds a UTF-8 file handler.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if _named_handler(root, CONSOLE_HANDLER) is None:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if config.log_file and _named_handler(root, FILE_HANDLER) is None:
        file_handler = logging.FileHandler(Path(config.log_file).resolve(), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    logging.getLogger("uvicorn.access").setLevel(
        logging.INFO if config.access_log else logging.WARNING
    )
    return root
