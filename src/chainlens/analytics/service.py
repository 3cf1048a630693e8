# File: src/chainlens/analytics/service.py
from datetime import datetime, timedelta
from statistics import fmean
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from .catalog import (
    ANALYSIS_OPPORTUNITIES,
    ANALYSIS_THREATS,
    build_dashboard,
    build_insights,
    build_prediction_models,
)
from .models import (
    AlertReport,
    AlertSummary,
    Analysis,
    AnalysisReport,
    AnalysisResults,
    DashboardSnapshot,
    InsightReport,
    InsightSummary,
    MetricAggregates,
    MetricsReport,
    ModelReport,
    ModelSummary,
    NetworkMetricsSample,
)
from ..exceptions import InvalidRequestError, ValidationError
from ..explorer.models import WireModel
from ..explorer.params import get_int, get_str
from ..utils.config import Config
from ..utils.logger import get_logger
from ..utils.random_source import RandomSource, utc_now

logger = get_logger(__name__)


def _mean(values: Sequence[float]) -> Optional[float]:
    return fmean(values) if values else None


class AnalyticsQueryService:
    """AI insight, metric and prediction queries over fixed and random data."""

    name = 'analytics'
    default_type = 'insights'
    internal_error_message = 'Failed to fetch AI analytics'
    extra_types = ('dashboard',)

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        clock: Callable[[], datetime] = utc_now
    ):
        self.rng = rng or RandomSource()
        self.clock = clock
        self.handlers: Dict[str, Callable[[Mapping[str, str]], WireModel]] = {
            'insights': self.insights,
            'metrics': self.metrics,
            'models': self.models,
            'analyze': self.analyze,
            'alerts': self.alerts,
        }

    def query(self, params: Mapping[str, str]) -> WireModel:
        query_type = params.get('type') or self.default_type
        handler = self.handlers.get(query_type)
        if handler is None:
            raise InvalidRequestError('Invalid analytics type')
        logger.debug("Analytics query type=%s", query_type)
        return handler(params)

    def insights(self, params: Mapping[str, str]) -> InsightReport:
        limit = get_int(params, 'limit', Config.DEFAULT_LIMIT)
        insights = build_insights(self.clock())[:limit]

        def count(kind: str) -> int:
            return sum(1 for insight in insights if insight.type == kind)

        # Counts describe the returned slice, not the whole catalog
        return InsightReport(
            insights=insights,
            summary=InsightSummary(
                total=len(insights),
                anomalies=count('anomaly'),
                predictions=count('prediction'),
                trends=count('trend'),
                patterns=count('pattern'),
            ),
        )

    def generate_metrics(self, hours: int) -> List[NetworkMetricsSample]:
        """One sample per hour walking back from now, returned oldest first."""
        rng = self.rng
        now = self.clock()
        samples = []
        for i in range(hours):
            samples.append(NetworkMetricsSample(
                timestamp=now - timedelta(seconds=i * Config.METRIC_INTERVAL),
                tps=rng.span(15, 50),
                gas_price=rng.span(20, 30),
                block_time=rng.uniform(12, 6),
                network_utilization=rng.uniform(60, 40),
                active_addresses=rng.span(500_000, 100_000),
            ))
        samples.reverse()
        return samples

    def metrics(self, params: Mapping[str, str]) -> MetricsReport:
        samples = self.generate_metrics(get_int(params, 'hours', Config.DEFAULT_METRIC_HOURS))
        return MetricsReport(
            metrics=samples,
            aggregates=MetricAggregates(
                avg_tps=_mean([s.tps for s in samples]),
                avg_gas_price=_mean([s.gas_price for s in samples]),
                avg_block_time=_mean([s.block_time for s in samples]),
                avg_utilization=_mean([s.network_utilization for s in samples]),
            ),
        )

    def models(self, params: Mapping[str, str]) -> ModelReport:
        now = self.clock()
        models = build_prediction_models(now)
        window = timedelta(seconds=Config.ACTIVE_MODEL_WINDOW)
        return ModelReport(
            models=models,
            summary=ModelSummary(
                total_models=len(models),
                avg_accuracy=fmean(m.accuracy for m in models),
                active_models=sum(1 for m in models if now - m.last_updated < window),
            ),
        )

    def analyze(self, params: Mapping[str, str]) -> AnalysisReport:
        query = get_str(params, 'query')
        if query is None:
            raise ValidationError('Analysis query required')

        rng = self.rng
        results = AnalysisResults(
            sentiment=rng.uniform(-1, 2),
            volatility=rng.random(),
            risk_score=rng.random(),
            opportunities=list(ANALYSIS_OPPORTUNITIES[:rng.span(1, 3)]),
            threats=list(ANALYSIS_THREATS[:rng.span(1, 3)]),
        )
        return AnalysisReport(analysis=Analysis(
            query=query,
            timestamp=self.clock(),
            results=results,
            confidence=rng.uniform(0.6, 0.4),
        ))

    def alerts(self, params: Mapping[str, str]) -> AlertReport:
        severity = get_str(params, 'severity') or 'all'
        limit = get_int(params, 'limit', Config.DEFAULT_LIMIT)

        matching = [
            insight for insight in build_insights(self.clock())
            if severity == 'all' or insight.impact == severity
        ]
        # Only high and critical impacts are alert-worthy, whatever severity was asked for
        alerts = [insight for insight in matching if insight.impact in Config.ALERT_IMPACTS][:limit]
        return AlertReport(
            alerts=alerts,
            summary=AlertSummary(
                total=len(alerts),
                critical=sum(1 for a in alerts if a.impact == 'critical'),
                high=sum(1 for a in alerts if a.impact == 'high'),
            ),
        )

    def dashboard(self, timeframe: Optional[str] = None) -> DashboardSnapshot:
        timeframe = timeframe or Config.DEFAULT_DASHBOARD_TIMEFRAME
        if timeframe not in Config.DASHBOARD_TIMEFRAMES:
            raise ValidationError(
                f"Timeframe must be one of {', '.join(Config.DASHBOARD_TIMEFRAMES)}"
            )
        return build_dashboard(timeframe, self.clock())
