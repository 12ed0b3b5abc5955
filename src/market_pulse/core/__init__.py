"""Core domain layer."""

from market_pulse.core.entities import (
    AdNetworkId,
    AdRequest,
    Item,
    ItemType,
    NetworkPerformance,
    NewsRequest,
    NewsSourceId,
    PipelineResult,
    SourceOutcome,
)
from market_pulse.core.errors import AggregationFailure, SourceUnavailable, UpstreamError
from market_pulse.core.interfaces import BriefingGenerator, ItemSource
from market_pulse.core.performance import PerformanceTracker

__all__ = [
    "Item",
    "ItemType",
    "NewsSourceId",
    "AdNetworkId",
    "SourceOutcome",
    "PipelineResult",
    "NewsRequest",
    "AdRequest",
    "NetworkPerformance",
    "ItemSource",
    "BriefingGenerator",
    "PerformanceTracker",
    "SourceUnavailable",
    "AggregationFailure",
    "UpstreamError",
]
