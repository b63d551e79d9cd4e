"""
Tests for logging setup.
"""

import logging

import pytest

from wordreader.logging import (
    ColoredFormatter,
    LogConfig,
    get_log_level,
    get_logger,
    setup_logging,
    setup_logging_from_args,
)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logging.getLogger("wordreader").handlers.clear()


def test_get_logger_prefixes_name() -> None:
    assert get_logger("reader").name == "wordreader.reader"
    assert get_logger("wordreader.sources").name == "wordreader.sources"


def test_get_log_level() -> None:
    assert get_log_level("debug") == logging.DEBUG
    assert get_log_level("WARN") == logging.WARNING
    assert get_log_level("nonsense") == logging.INFO


def test_setup_logging_from_args_levels() -> None:
    setup_logging_from_args(debug=True)
    (handler,) = logging.getLogger("wordreader").handlers
    assert handler.level == logging.DEBUG

    setup_logging_from_args(quiet=True)
    (handler,) = logging.getLogger("wordreader").handlers
    assert handler.level == logging.ERROR


def test_file_logging(tmp_path) -> None:
    log_file = tmp_path / "logs" / "wordreader.log"
    setup_logging(LogConfig(file_path=str(log_file)))

    get_logger("reader").debug("including common.pro")
    for handler in logging.getLogger("wordreader").handlers:
        handler.flush()
        handler.close()

    assert "including common.pro" in log_file.read_text()


def test_colored_formatter_restores_record() -> None:
    formatter = ColoredFormatter(fmt="%(levelname)s %(name)s %(message)s", use_colors=True)
    record = logging.LogRecord("wordreader.reader", logging.ERROR, __file__, 1, "boom", None, None)

    output = formatter.format(record)

    assert "boom" in output
    assert "\033[" in output
    assert record.levelname == "ERROR"


def test_formatter_without_colors() -> None:
    formatter = ColoredFormatter(fmt="%(levelname)s %(message)s", use_colors=False)
    record = logging.LogRecord("wordreader.reader", logging.WARNING, __file__, 1, "careful", None, None)

    assert formatter.format(record) == "WARNING careful"


def test_log_file_from_args(tmp_path) -> None:
    log_file = tmp_path / "wordreader.log"
    setup_logging_from_args(quiet=True, log_file=str(log_file))

    console, file_handler = logging.getLogger("wordreader").handlers
    assert console.level == logging.ERROR
    assert file_handler.level == logging.DEBUG
    file_handler.close()
