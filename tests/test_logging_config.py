import logging

import pytest

from isobands.logging_config import setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("isobands")
    level = logger.level
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(level)


def test_console_handler(package_logger):
    setup_logging(logging.DEBUG)
    assert package_logger.level == logging.DEBUG
    assert len(package_logger.handlers) == 1


def test_repeated_setup_does_not_duplicate(package_logger):
    setup_logging()
    setup_logging()
    assert len(package_logger.handlers) == 1


def test_log_file(package_logger, tmp_path):
    log_file = tmp_path / "isobands.log"
    setup_logging(logging.INFO, log_file=str(log_file))
    assert len(package_logger.handlers) == 2

    logging.getLogger("isobands.contouring.mesher").info("hello from the mesher")
    for handler in package_logger.handlers:
        handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "Logging initialized." in text
    assert "isobands.contouring.mesher - INFO - hello from the mesher" in text


def test_setup_closes_previous_file(package_logger, tmp_path):
    setup_logging(log_file=str(tmp_path / "first.log"))
    file_handler = next(h for h in package_logger.handlers if isinstance(h, logging.FileHandler))

    setup_logging()
    assert file_handler not in package_logger.handlers
    assert file_handler.stream is None
