import logging

from tuitris.config import LOG_FORMAT, LOGGER_NAME


def setup_logging(log_file=None, debug=False):
    """Configure the game logger. The terminal belongs to curses, so records
    only go somewhere when a log file is given."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()
    logger.addHandler(handler)
    logger.propagate = False
    return logger
