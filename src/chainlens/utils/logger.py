# src/chainlens/utils/logger.py
import logging
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
ROOT_LOGGER_NAME = 'chainlens'


def resolve_level(level: Union[int, str, None], default: int = logging.INFO) -> int:
    """Turn a level name from the YAML config ("debug", "INFO") into a logging constant"""
    if level is None:
        return default
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else default


def get_logger(name: str, level: Union[int, str, None] = None) -> logging.Logger:
    """Create a logger under the chainlens namespace.

    Only the namespace root gets a stream handler; child loggers propagate
    to it so a record is never printed twice.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + '.'):
        name = f'{ROOT_LOGGER_NAME}.{name}'
    logger = logging.getLogger(name)

    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:  # Only add handler if none exists
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.propagate = False
    if not root.level:
        root.setLevel(logging.INFO)

    if level is not None:
        logger.setLevel(resolve_level(level))

    return logger


def attach_handlers(*handlers: Optional[logging.Handler]) -> None:
    """Route the chainlens namespace to the given handlers instead of the default stream"""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for existing in list(root.handlers):
        root.removeHandler(existing)
    for handler in handlers:
        if handler is not None:
            root.addHandler(handler)
