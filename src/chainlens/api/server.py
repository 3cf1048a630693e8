# File: src/chainlens/api/server.py
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routes import analytics_router, blockchain_router, system_router
from ..analytics.service import AnalyticsQueryService
from ..config.settings import ServiceConfig
from ..explorer.generator import MockChainGenerator
from ..explorer.service import BlockchainQueryService
from ..monitoring.metrics import MetricsCollector
from ..utils.random_source import RandomSource


def create_app(
    settings: Optional[ServiceConfig] = None,
    rng: Optional[RandomSource] = None,
    blockchain_service: Optional[BlockchainQueryService] = None,
    analytics_service: Optional[AnalyticsQueryService] = None,
) -> FastAPI:
    settings = settings or ServiceConfig(config_path=None)
    rng = rng or RandomSource()

    app = FastAPI(title="chainlens API")

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get("server.cors_origins", ["*"]),
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.blockchain_service = blockchain_service or BlockchainQueryService(
        MockChainGenerator(rng)
    )
    app.state.analytics_service = analytics_service or AnalyticsQueryService(rng)
    app.state.metrics = MetricsCollector() if settings.get("monitoring.enabled", True) else None

    # Include routers
    app.include_router(blockchain_router)
    app.include_router(analytics_router)
    app.include_router(system_router)

    return app
