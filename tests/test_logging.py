import logging

import pytest

from quickwash_api.app.core.config import Settings
from quickwash_api.app.core.logging_config import CONSOLE_HANDLER, FILE_HANDLER, setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    level = root.level
    access_level = logging.getLogger("uvicorn.access").level
    yield root
    for handler in list(root.handlers):
        if handler.get_name() == FILE_HANDLER:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    logging.getLogger("uvicorn.access").setLevel(access_level)


def _named(root, name):
    return [h for h in root.handlers if h.get_name() == name]


def test_repeat_setup_keeps_one_console_handler(root_logger):
    setup_logging(Settings(log_level="info", log_file=""))
    setup_logging(Settings(log_level="DEBUG", log_file=""))
    assert len(_named(root_logger, CONSOLE_HANDLER)) == 1
    assert _named(root_logger, FILE_HANDLER) == []
    assert root_logger.level == logging.DEBUG


def test_log_file_receives_records(root_logger, tmp_path):
    logfile = tmp_path / "quickwash.log"
    setup_logging(Settings(log_level="INFO", log_file=str(logfile)))
    setup_logging(Settings(log_level="INFO", log_file=str(logfile)))
    assert len(_named(root_logger, FILE_HANDLER)) == 1

    logging.getLogger("quickwash_api.tests").info("Booking %s created", 42)
    _named(root_logger, FILE_HANDLER)[0].flush()
    line = logfile.read_text(encoding="utf-8").strip()
    assert line.endswith("[INFO] quickwash_api.tests: Booking 42 created")


def test_access_log_quiet_unless_enabled(root_logger):
    setup_logging(Settings(log_level="INFO", access_log=False))
    assert logging.getLogger("uvicorn.access").level == logging.WARNING
    setup_logging(Settings(log_level="INFO", access_log=True))
    assert logging.getLogger("uvicorn.access").level == logging.INFO


def test_unknown_level_falls_back_to_info(root_logger):
    setup_logging(Settings(log_level="chatty"))
    assert root_logger.level == logging.INFO
