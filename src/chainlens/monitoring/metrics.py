# File: src/chainlens/monitoring/metrics.py

import time
from contextlib import contextmanager
from typing import Iterator

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST


class MetricsCollector:
    """Request counters and latencies for the query services.

    Each collector owns its registry so several apps (tests) can coexist in
    one process.
    """

    content_type = CONTENT_TYPE_LATEST

    def __init__(self, registry: CollectorRegistry = None):
        self.registry = registry or CollectorRegistry()
        self.requests = Counter(
            'chainlens_requests',
            'Queries handled, by service, query type and outcome',
            ['service', 'type', 'status'],
            registry=self.registry,
        )
        self.request_duration = Histogram(
            'chainlens_request_duration_seconds',
            'Time spent generating a query response',
            ['service'],
            registry=self.registry,
        )

    def record_request(self, service: str, query_type: str, status: int):
        self.requests.labels(service=service, type=query_type, status=str(status)).inc()

    @contextmanager
    def time_request(self, service: str) -> Iterator[None]:
        start = time.perf_counter()
        try:
            yield
        finally:
            self.request_duration.labels(service=service).observe(time.perf_counter() - start)

    def request_count(self, service: str, query_type: str, status: int) -> float:
        value = self.registry.get_sample_value(
            'chainlens_requests_total',
            {'service': service, 'type': query_type, 'status': str(status)},
        )
        return value or 0.0

    def export(self) -> bytes:
        return generate_latest(self.registry)
