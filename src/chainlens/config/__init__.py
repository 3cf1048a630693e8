# src/chainlens/config/__init__.py
from .settings import ServiceConfig, DEFAULTS, DEFAULT_CONFIG_PATH

__all__ = ['ServiceConfig', 'DEFAULTS', 'DEFAULT_CONFIG_PATH']
