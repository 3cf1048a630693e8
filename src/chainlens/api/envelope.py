# File: src/chainlens/api/envelope.py
from typing import Any, Callable, Optional, Tuple

from ..exceptions import ExplorerError, InternalError
from ..explorer.models import WireModel
from ..monitoring.metrics import MetricsCollector
from ..utils.logger import get_logger

logger = get_logger(__name__)


def success(data: Any) -> dict:
    return {'success': True, 'data': data}


def failure(message: str) -> dict:
    return {'success': False, 'error': message}


def execute(
    service,
    query_type: str,
    operation: Callable[[], WireModel],
    metrics: Optional[MetricsCollector] = None
) -> Tuple[int, dict]:
    """Run one query and wrap the outcome in the response envelope.

    Returns ``(status_code, body)``. Client errors keep their message;
    anything else becomes an ``InternalError`` with the service's generic
    message while the cause goes to the log.
    """
    try:
        if metrics is not None:
            with metrics.time_request(service.name):
                payload = operation().to_wire()
        else:
            payload = operation().to_wire()
        status, body = 200, success(payload)
    except ExplorerError as e:
        logger.info("%s query rejected (%s): %s", service.name, query_type, e.message)
        status, body = e.status_code, failure(e.message)
    except Exception:
        logger.exception("Error serving %s query (%s)", service.name, query_type)
        error = InternalError(service.internal_error_message)
        status, body = error.status_code, failure(error.message)

    if metrics is not None:
        known = set(service.handlers) | set(service.extra_types)
        label = query_type if query_type in known else 'other'
        metrics.record_request(service.name, label, status)
    return status, body
