import logging

from logger import ROOT_LOGGER_NAME, get_logger, setup_logging


def test_named_loggers_are_children_of_the_app_logger():
    assert get_logger().name == ROOT_LOGGER_NAME
    assert get_logger('store').name == 'boutique.store'
    assert get_logger('boutique.app').name == 'boutique.app'


def test_setup_logging_twice_only_changes_level():
    logger = setup_logging('INFO')
    handlers = list(logger.handlers)
    assert setup_logging('DEBUG') is logger
    assert logger.handlers == handlers
    assert logger.level == logging.DEBUG
