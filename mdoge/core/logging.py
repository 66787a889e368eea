"""
Module loggers for mdoge. Each module asks for its own logger by name; the CLI adjusts them together.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

__all__ = ["get_logger", "set_log_level"]

DEFAULT_FORMAT = '%(asctime)s [%(name)s] [%(levelname)s]: %(message)s'


def get_logger(name: str, log_level: str = "INFO", log_file: Optional[Path] = None,
               format_string: Optional[str] = None) -> logging.Logger:
    """
    Return the named logger, attaching a stdout handler (and a file handler when log_file is given) the first time
    the name is requested. Later calls return the configured logger untouched.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, log_level.upper()))
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(stream=sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def set_log_level(log_level: str, prefix: str = "mdoge") -> None:
    """Apply the level to every logger already created under the package prefix"""
    level = getattr(logging, log_level.upper())
    for name, logger in logging.root.manager.loggerDict.items():
        if name.startswith(prefix) and isinstance(logger, logging.Logger):
            logger.setLevel(level)
