# File: src/chainlens/api/routes/blockchain.py
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ..envelope import execute
from ...explorer.params import first_values

router = APIRouter(prefix="/api/blockchain")


@router.get("")
async def query_blockchain(request: Request):
    service = request.app.state.blockchain_service
    params = first_values(request.query_params.multi_items())
    query_type = params.get('type') or service.default_type
    status, body = execute(
        service, query_type, lambda: service.query(params), request.app.state.metrics
    )
    return JSONResponse(body, status_code=status)


@router.get("/overview")
async def get_overview(request: Request):
    service = request.app.state.blockchain_service
    status, body = execute(service, 'overview', service.overview, request.app.state.metrics)
    return JSONResponse(body, status_code=status)
