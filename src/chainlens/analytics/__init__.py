# src/chainlens/analytics/__init__.py
from .service import AnalyticsQueryService

__all__ = ['AnalyticsQueryService']
