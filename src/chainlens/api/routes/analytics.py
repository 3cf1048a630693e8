# File: src/chainlens/api/routes/analytics.py
from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ..envelope import execute
from ...explorer.params import first_values

router = APIRouter(prefix="/api/analytics")


@router.get("")
async def query_analytics(request: Request):
    service = request.app.state.analytics_service
    params = first_values(request.query_params.multi_items())
    query_type = params.get('type') or service.default_type
    status, body = execute(
        service, query_type, lambda: service.query(params), request.app.state.metrics
    )
    return JSONResponse(body, status_code=status)


@router.get("/dashboard")
async def get_dashboard(request: Request, timeframe: Optional[str] = None):
    service = request.app.state.analytics_service
    status, body = execute(
        service, 'dashboard', lambda: service.dashboard(timeframe), request.app.state.metrics
    )
    return JSONResponse(body, status_code=status)
