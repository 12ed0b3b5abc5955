"""Core domain entities."""

import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional

SLUG_PATTERN = re.compile(r"[A-Za-z0-9_-]{1,32}")


class ItemType(str, Enum):
    """Type of aggregated item."""

    ARTICLE = "article"
    AD_CREATIVE = "ad_creative"


class NewsSourceId(str, Enum):
    """Configured news sources, in priority order."""

    NEWSAPI = "newsapi"
    ALPHA_VANTAGE = "alphavantage"
    FINNHUB = "finnhub"
    CRYPTOCOMPARE = "cryptocompare"


class AdNetworkId(str, Enum):
    """Supported ad networks."""

    ADSENSE = "adsense"
    PROPELLERADS = "propellerads"
    ADSTERRA = "adsterra"
    MEDIANET = "medianet"


@dataclass
class Item:
    """Unit flowing through an aggregation pipeline."""

    type: ItemType
    identity: str
    source: str
    payload: dict[str, Any]
    derived_scores: Optional[dict[str, Any]] = None

    def __post_init__(self) -> None:
        if not self.identity:
            raise ValueError("Identity cannot be empty")

    @property
    def is_scored(self) -> bool:
        return self.derived_scores is not None


@dataclass
class SourceOutcome:
    """Settled result of one source adapter call."""

    source: str
    succeeded: bool
    items: list[Item] = field(default_factory=list)
    reason: Optional[str] = None

    @classmethod
    def success(cls, source: str, items: list[Item]) -> "SourceOutcome":
        return cls(source=source, succeeded=True, items=list(items))

    @classmethod
    def failure(cls, source: str, reason: str) -> "SourceOutcome":
        return cls(source=source, succeeded=False, reason=reason)


@dataclass
class PipelineResult:
    """Ranked output of an aggregation pipeline."""

    items: list[Item]
    source_outcomes: list[SourceOutcome]
    generated_at: datetime
    error: Optional[str] = None

    @property
    def degraded(self) -> bool:
        return self.error is not None

    @property
    def sources_used(self) -> list[bool]:
        return [outcome.succeeded for outcome in self.source_outcomes]


@dataclass
class NewsRequest:
    """Query for the news aggregation pipeline."""

    category: str = "business"
    page_size: int = 15
    sources: str = "all"

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError("Page size must be positive")

    def includes(self, source_id: str) -> bool:
        """Check whether a source was selected by the `sources` filter."""
        if not self.sources or self.sources.strip().lower() == "all":
            return True
        selected = {s.strip().lower() for s in self.sources.split(",") if s.strip()}
        return source_id.lower() in selected


@dataclass
class AdRequest:
    """Query for the ad selection pipeline."""

    ad_type: str = "banner"
    placement: str = "header"
    user_preference: Optional[str] = None

    def __post_init__(self) -> None:
        # Both values end up inside rendered script tags.
        if not SLUG_PATTERN.fullmatch(self.ad_type):
            raise ValueError(f"Invalid ad type: {self.ad_type!r}")
        if not SLUG_PATTERN.fullmatch(self.placement):
            raise ValueError(f"Invalid placement: {self.placement!r}")


@dataclass
class NetworkPerformance:
    """Rolling performance record for one ad network."""

    requests: int = 0
    successes: int = 0
    success_rate: float = 0.0
    total_revenue: float = 0.0
