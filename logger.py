# logger.py - console and optional file logging for the app
# modules log through children of the "boutique" logger

import logging
import threading
from pathlib import Path

ROOT_LOGGER_NAME = "boutique"

_lock = threading.Lock()
_configured = False


def setup_logging(level="INFO", log_file=None):
    """Set up the "boutique" logger once per process; later calls only change the level."""
    global _configured
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    with _lock:
        if _configured:
            logger.setLevel(level)
            return logger

        logger.setLevel(level)
        logger.handlers.clear()

        formatter = logging.Formatter(
            "%(asctime)s %(levelname)s [%(name)s] %(funcName)s:%(lineno)d %(message)s"
        )

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_file:
            path = Path(log_file)
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(path, encoding='utf-8')
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        _configured = True
    return logger


def get_logger(name=None) -> logging.Logger:
    """Return the application logger, or a named child of it."""
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
