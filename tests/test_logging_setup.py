import io
import logging

from finance_monitor import logging_setup


def test_parse_level_accepts_names_and_numbers():
    assert logging_setup._parse_level("debug") == logging.DEBUG
    assert logging_setup._parse_level("30") == 30
    assert logging_setup._parse_level(logging.ERROR) == logging.ERROR
    assert logging_setup._parse_level("nonsense") == logging.INFO


def test_configure_logging_is_idempotent(monkeypatch):
    monkeypatch.setattr(logging_setup, "_CONFIGURED", False)
    logger = logging.getLogger("finance_monitor")
    original_handlers = list(logger.handlers)
    original_propagate = logger.propagate
    stream = io.StringIO()
    try:
        logging_setup.configure_logging("INFO", fmt="%(levelname)s %(message)s", stream=stream)
        logging_setup.configure_logging("DEBUG", stream=io.StringIO())
        logging_setup.get_logger("finance_monitor.tests").info("hello")
        assert stream.getvalue().strip() == "INFO hello"
        stream_handlers = [h for h in logger.handlers if isinstance(h, logging.StreamHandler)]
        assert len(stream_handlers) == 1
    finally:
        logger.handlers = original_handlers
        logger.propagate = original_propagate
