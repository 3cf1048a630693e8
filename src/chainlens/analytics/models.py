# File: src/chainlens/analytics/models.py
from datetime import datetime
from typing import Any, ClassVar, Dict, List, Literal, Optional

from pydantic import Field

from ..explorer.models import WireModel


class AIInsight(WireModel):
    id: str
    type: Literal['pattern', 'anomaly', 'prediction', 'trend']
    title: str
    description: str
    confidence: float
    impact: Literal['low', 'medium', 'high', 'critical']
    timestamp: datetime
    data: Dict[str, Any]
    recommendations: Optional[List[str]] = None

    # recommendations is omitted, not null, when an insight has none
    omit_none: ClassVar[bool] = True


class InsightSummary(WireModel):
    total: int
    anomalies: int
    predictions: int
    trends: int
    patterns: int


class InsightReport(WireModel):
    omit_none: ClassVar[bool] = True

    insights: List[AIInsight]
    summary: InsightSummary


class NetworkMetricsSample(WireModel):
    timestamp: datetime
    tps: int
    gas_price: int
    block_time: float
    network_utilization: float
    active_addresses: int


class MetricAggregates(WireModel):
    avg_tps: Optional[float]
    avg_gas_price: Optional[float]
    avg_block_time: Optional[float]
    avg_utilization: Optional[float]


class MetricsReport(WireModel):
    metrics: List[NetworkMetricsSample]
    aggregates: MetricAggregates


class Prediction(WireModel):
    timeframe: str
    value: float
    confidence: float


class PredictionModel(WireModel):
    id: str
    name: str
    type: Literal['price', 'volume', 'gas', 'network']
    accuracy: float
    last_updated: datetime
    predictions: List[Prediction]


class ModelSummary(WireModel):
    total_models: int
    avg_accuracy: float
    active_models: int


class ModelReport(WireModel):
    models: List[PredictionModel]
    summary: ModelSummary


class AnalysisResults(WireModel):
    sentiment: float
    volatility: float
    risk_score: float
    opportunities: List[str]
    threats: List[str]


class Analysis(WireModel):
    query: str
    timestamp: datetime
    results: AnalysisResults
    confidence: float


class AnalysisReport(WireModel):
    analysis: Analysis


class AlertSummary(WireModel):
    total: int
    critical: int
    high: int


class AlertReport(WireModel):
    alerts: List[AIInsight]
    summary: AlertSummary

    omit_none: ClassVar[bool] = True


# Dashboard snapshot shapes

class DashboardMetrics(WireModel):
    total_transactions: int
    total_volume: float
    average_gas_price: float
    active_addresses: int
    contract_calls: int
    dex_volume: float
    nft_trades: int
    defi_tvl: float


class DashboardPredictions(WireModel):
    gas_price_next_1h: float = Field(alias='gasPriceNext1h')
    gas_price_trend: Literal['up', 'down', 'stable']
    volume_prediction: float
    network_congestion: Literal['low', 'medium', 'high']


class DashboardInsight(WireModel):
    id: str
    type: Literal['trend', 'opportunity', 'risk', 'optimization']
    title: str
    description: str
    confidence: int  # percent
    impact: Literal['low', 'medium', 'high']
    recommendation: str


class Anomaly(WireModel):
    id: str
    type: Literal['suspicious', 'unusual', 'error']
    severity: Literal['low', 'medium', 'high', 'critical']
    description: str
    addresses: List[str]
    timestamp: datetime
    investigation: str


class SmartContractStats(WireModel):
    address: str
    name: str
    type: Literal['DEX', 'NFT', 'DeFi', 'Gaming', 'Other']
    transactions_24h: int = Field(alias='transactions24h')
    volume_24h: float = Field(alias='volume24h')
    gas_used: int
    risk_score: int
    ai_analysis: str


class DashboardSnapshot(WireModel):
    timeframe: Literal['1h', '24h', '7d', '30d']
    metrics: DashboardMetrics
    predictions: DashboardPredictions
    insights: List[DashboardInsight]
    anomalies: List[Anomaly]
    smart_contract_analysis: List[SmartContractStats]
