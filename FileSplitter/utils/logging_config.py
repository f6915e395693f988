# FileSplitter/FileSplitter/utils/logging_config.py
import logging
import sys

LEVEL_MAP = {
    'quiet': logging.WARNING,
    'normal': logging.INFO,
    'debug': logging.DEBUG
}

def setup_logger(name: str, verbosity: str = 'normal') -> logging.Logger:
    """
    Set up a stdout logger for the splitter with a verbosity level.

    Args:
        name: Logger name
        verbosity: 'quiet', 'normal', or 'debug'
    """
    logger = logging.getLogger(name)
    level = LEVEL_MAP.get(verbosity, logging.INFO)

    if not logger.handlers:  # Only attach a handler once
        logger.propagate = False

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        ))
        logger.addHandler(handler)

    # A later call with a different verbosity still takes effect
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)

    logger.debug(f"Logger '{name}' set to {logging.getLevelName(level)}")
    return logger
