# src/chainlens/api/routes/__init__.py
from .blockchain import router as blockchain_router
from .analytics import router as analytics_router
from .system import router as system_router

__all__ = ['blockchain_router', 'analytics_router', 'system_router']
