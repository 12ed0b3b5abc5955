"""Business logic use cases."""

import logging
from datetime import datetime, timezone
from typing import Optional

from market_pulse.adapters.ads import AdNetwork
from market_pulse.config import AdsConfig
from market_pulse.core import (
    AdRequest,
    Item,
    ItemSource,
    NewsRequest,
    PerformanceTracker,
    PipelineResult,
    SourceOutcome,
)
from market_pulse.core.ad_ranking import network_score, rank_networks
from market_pulse.core.fallback import FALLBACK_AD_ERROR, fallback_ad, fallback_news
from market_pulse.core.pipeline import collect_all, invoke_source, merge_unique, source_name
from market_pulse.core.scoring import MarketImpactScorer

logger = logging.getLogger(__name__)


class NewsAggregationService:
    """Fan out to every news source, merge, score and rank the articles."""

    def __init__(
        self,
        sources: list[ItemSource],
        scorer: Optional[MarketImpactScorer] = None,
        timeout: float = 5.0,
    ) -> None:
        self.sources = sources
        self.scorer = scorer or MarketImpactScorer()
        self.timeout = timeout

    @property
    def source_names(self) -> list[str]:
        return [source_name(source) for source in self.sources]

    async def aggregate(self, request: NewsRequest, now: Optional[datetime] = None) -> PipelineResult:
        """Run the pipeline. Never raises; degrades to the fallback articles."""
        now = now or datetime.now(timezone.utc)
        outcomes: Optional[list[SourceOutcome]] = None

        try:
            outcomes = await collect_all(
                self.sources,
                request,
                self.timeout,
                enabled=lambda source: request.includes(source_name(source)),
            )

            succeeded = sum(1 for o in outcomes if o.succeeded)
            logger.info(
                "News fan-out settled: %d/%d sources succeeded", succeeded, len(outcomes)
            )

            merged = merge_unique(outcomes)
            if not merged:
                logger.warning("No articles from any source, serving fallback news")
                return fallback_news(now, self.source_names, outcomes)

            ranked = self.scorer.score_and_rank(merged[: request.page_size], now)
            return PipelineResult(items=ranked, source_outcomes=outcomes, generated_at=now)

        except Exception:
            logger.exception("News aggregation failed, serving fallback news")
            return fallback_news(now, self.source_names, outcomes)


class AdSelectionService:
    """Pick the best-scoring ad network that can serve the request."""

    def __init__(
        self,
        networks: dict[str, AdNetwork],
        tracker: PerformanceTracker,
        config: Optional[AdsConfig] = None,
        timeout: float = 5.0,
    ) -> None:
        self.networks = networks
        self.tracker = tracker
        self.config = config or AdsConfig()
        self.timeout = timeout

    def ranked_networks(self) -> list[str]:
        """Enabled networks that have an adapter, best first."""
        return [key for key in rank_networks(self.config, self.tracker) if key in self.networks]

    def _unattempted(self, key: str) -> SourceOutcome:
        profile = self.config.networks.get(key)
        if profile is None or not profile.enabled:
            return SourceOutcome.failure(key, "disabled")
        return SourceOutcome.failure(key, "not_attempted")

    async def select(self, request: AdRequest) -> PipelineResult:
        """Try networks in score order until one serves.

        Every attempt is recorded in the tracker before moving on. When all
        fail, the house ad is returned with an error set.
        """
        now = datetime.now(timezone.utc)
        attempts: dict[str, SourceOutcome] = {}
        chosen: Optional[Item] = None

        try:
            order = self.ranked_networks()
            logger.info(
                "Optimizing ad for %s/%s. Top network: %s",
                request.ad_type,
                request.placement,
                order[0] if order else None,
            )

            for key in order:
                network = self.networks[key]
                score = network_score(key, network.profile, self.tracker, self.config)
                outcome = await invoke_source(network, request, self.timeout)
                attempts[key] = outcome

                if outcome.succeeded and outcome.items:
                    creative = outcome.items[0]
                    revenue = float(creative.payload.get("estimatedRevenue") or 0)
                    self.tracker.record(key, True, revenue)
                    chosen = Item(
                        type=creative.type,
                        identity=creative.identity,
                        source=creative.source,
                        payload=creative.payload,
                        derived_scores={"networkScore": score},
                    )
                    break

                logger.warning("Ad network %s failed: %s", key, outcome.reason or "empty")
                self.tracker.record(key, False)

        except Exception:
            logger.exception("Ad selection failed, serving fallback ad")
            chosen = None

        outcomes = [attempts.get(key) or self._unattempted(key) for key in self.networks]

        if chosen is None:
            return PipelineResult(
                items=[fallback_ad()],
                source_outcomes=outcomes,
                generated_at=now,
                error=FALLBACK_AD_ERROR,
            )

        self.tracker.track_request(float(chosen.payload.get("estimatedRevenue") or 0), now)
        logger.info("Ad request: %s/%s -> %s", request.ad_type, request.placement, chosen.identity)
        return PipelineResult(items=[chosen], source_outcomes=outcomes, generated_at=now)
