# src/chainlens/cli/__init__.py
from .cli import CLI, main

__all__ = ['CLI', 'main']
