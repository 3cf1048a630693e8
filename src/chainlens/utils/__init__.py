# src/chainlens/utils/__init__.py
from .logger import get_logger
from .config import Config
from .random_source import RandomSource, utc_now

__all__ = ['get_logger', 'Config', 'RandomSource', 'utc_now']
