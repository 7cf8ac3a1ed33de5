"""Unit tests for utils.logger.setup_logging().

setup_logging() attaches a console handler, plus a dated file handler unless
log_to_file=False (the CLI script's mode). Each test uses its own logger name
and removes its handlers afterwards so tests don't leak into one another.

Run from the project root:
    python -m pytest tests/unit/test_logger.py -v
"""

import logging

import pytest

from utils.logger import setup_logging


@pytest.fixture
def logger_name(request):
    name = f"reviewdecay-test-{request.node.name}"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


class TestSetupLogging:
    """Handler wiring for web (file + console) and CLI (console only) use."""

    def test_file_and_console_by_default(self, tmp_path, logger_name):
        logger = setup_logging(str(tmp_path / "logs"), name=logger_name)
        kinds = {type(h) for h in logger.handlers}
        assert kinds == {logging.StreamHandler, logging.FileHandler}
        assert len(list((tmp_path / "logs").glob(f"{logger_name}_*.log"))) == 1

    def test_console_only_skips_log_dir(self, tmp_path, logger_name):
        logger = setup_logging(str(tmp_path / "logs"), log_to_file=False, name=logger_name)
        assert [type(h) for h in logger.handlers] == [logging.StreamHandler]
        assert not (tmp_path / "logs").exists()

    def test_repeat_calls_do_not_duplicate_handlers(self, tmp_path, logger_name):
        setup_logging(str(tmp_path), name=logger_name)
        logger = setup_logging(str(tmp_path), name=logger_name)
        assert len(logger.handlers) == 2

    def test_level_applied(self, tmp_path, logger_name):
        logger = setup_logging(str(tmp_path), level=logging.WARNING,
                               log_to_file=False, name=logger_name)
        assert logger.level == logging.WARNING
        assert logger.handlers[0].level == logging.WARNING
