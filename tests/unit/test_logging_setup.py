import logging
import os
import sys

from thermistor_calculator.logging_setup import (
    _CONSOLE_HANDLER_NAME,
    _FILE_HANDLER_NAME,
    DEFAULT_LOG_FILE_NAME,
    setup_logging,
)


def own_handlers():
    """Root handlers added by setup_logging, ignoring those pytest attaches."""
    names = {_CONSOLE_HANDLER_NAME, _FILE_HANDLER_NAME}
    return [h for h in logging.getLogger().handlers if h.get_name() in names]


def test_creates_log_directory(tmp_path):
    log_dir = str(tmp_path / "logs")
    setup_logging(log_dir=log_dir, log_file_name="test.log")
    assert os.path.isdir(log_dir)


def test_returns_root_logger(tmp_path):
    result = setup_logging(log_dir=str(tmp_path), log_file_name="test.log")
    assert result is logging.getLogger()


def test_log_level_is_set():
    setup_logging(log_level="debug")
    assert logging.getLogger().level == logging.DEBUG


def test_default_log_level_is_warning():
    setup_logging()
    assert logging.getLogger().level == logging.WARNING


def test_handlers_are_added(tmp_path):
    setup_logging(log_dir=str(tmp_path), log_file_name="test.log")
    assert sorted(h.get_name() for h in own_handlers()) == [_CONSOLE_HANDLER_NAME, _FILE_HANDLER_NAME]


def test_console_only_without_log_dir():
    setup_logging()
    handlers = own_handlers()
    assert [h.get_name() for h in handlers] == [_CONSOLE_HANDLER_NAME]
    assert handlers[0].stream is sys.stderr


def test_does_not_add_duplicate_handlers(tmp_path):
    setup_logging(log_dir=str(tmp_path), log_file_name="test.log")
    handler_count = len(own_handlers())
    setup_logging(log_dir=str(tmp_path), log_file_name="test.log")
    assert len(own_handlers()) == handler_count == 2


def test_messages_reach_log_file(tmp_path):
    logger = setup_logging(log_level="INFO", log_dir=str(tmp_path))
    logger.info("table computed")
    for handler in logger.handlers:
        handler.flush()

    content = (tmp_path / DEFAULT_LOG_FILE_NAME).read_text()
    assert "[INFO] root: table computed" in content
