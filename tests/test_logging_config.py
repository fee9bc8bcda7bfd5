# tests/test_logging_config.py
"""
LOGGING TESTS: setup_logging
"""

import logging

from molcraft.logging_config import setup_logging


def test_console_handler_only():
    logger = setup_logging(logging.DEBUG)

    assert logger.name == 'molcraft'
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_repeated_setup_does_not_stack_handlers(tmp_path):
    log_file = tmp_path / 'molcraft.log'
    setup_logging(log_file=str(log_file))
    logger = setup_logging(log_file=str(log_file))

    assert len(logger.handlers) == 2

    logging.getLogger('molcraft.model').info("resolved bonds")
    for handler in logger.handlers:
        handler.flush()
    assert 'molcraft.model - INFO - resolved bonds' in log_file.read_text(encoding='utf-8')

    setup_logging()
