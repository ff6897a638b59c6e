"""
Logging configuration for the service clients.

Every module gets its logger through get_logger so the level and format are
consistent across clients.
"""
import logging
import os
import sys

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Top-level names of the loggers this project creates
PACKAGE_LOGGERS = ('config', 'logger_config', 'services', 'utils')


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (defaults to this module's name if not provided)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name or __name__)

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    log_level = os.environ.get('LOG_LEVEL', 'INFO').upper()
    logger.setLevel(getattr(logging, log_level, logging.INFO))

    # Library output goes to stderr so it never mixes with caller stdout
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    # Prevent propagation to root logger to avoid duplicate logs
    logger.propagate = False

    return logger


def set_log_level(level: str) -> None:
    """
    Change the level of the project loggers created through get_logger.

    Loggers owned by other libraries are left alone.

    Args:
        level: Level name such as 'DEBUG' or 'WARNING'
    """
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")
    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if not isinstance(logger, logging.Logger) or not logger.handlers:
            continue
        if name.split('.', 1)[0] in PACKAGE_LOGGERS:
            logger.setLevel(numeric)
