# src/chainlens/__init__.py
"""Mock blockchain explorer and analytics query services."""

__version__ = "0.1.0"
