# File: src/chainlens/api/routes/system.py
from fastapi import APIRouter, Request, Response

from ..envelope import success

router = APIRouter()


@router.get("/health")
async def health():
    return success({'status': 'ok'})


@router.get("/metrics")
async def metrics(request: Request):
    collector = request.app.state.metrics
    if collector is None:
        return Response(status_code=404)
    return Response(collector.export(), media_type=collector.content_type)
