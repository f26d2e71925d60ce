import logging

from .config import Settings


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    settings = Settings.from_env()

    handler = logging.StreamHandler()
    formatter = logging.Formatter(settings.log_format)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    # Library default is WARNING, override with COLLECTION_EXTENSIONS_LOG_LEVEL
    default_level = logging.WARNING
    try:
        level = getattr(logging, settings.log_level.upper())
    except AttributeError:
        level = default_level
    if not isinstance(level, int):
        level = default_level

    logger.setLevel(level)
    return logger
