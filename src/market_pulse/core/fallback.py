"""Static results served when live aggregation yields nothing."""

from datetime import datetime
from typing import Optional

from market_pulse.core.entities import Item, ItemType, PipelineResult, SourceOutcome

FALLBACK_NEWS_ERROR = "Using fallback news data"
FALLBACK_AD_ERROR = "All ad networks unavailable"

FALLBACK_AD_HTML = """
      <div class="ad-container fallback">
        <div class="ad-label">Premium Market Intelligence</div>
        <div class="fallback-ad">
          <h4>Institutional Grade Trading Signals</h4>
          <p>Real-time AI-powered market analysis</p>
          <button onclick="window.location.href='/premium'" class="premium-cta">
            Upgrade to Premium
          </button>
        </div>
      </div>
"""


def fallback_articles(now: datetime) -> list[Item]:
    """Two evergreen briefs with their scores already set."""
    return [
        Item(
            type=ItemType.ARTICLE,
            identity="fallback://market-pulse",
            source="fallback",
            payload={
                "title": "Market Pulse: Key Economic Indicators to Watch This Week",
                "description": (
                    "Professional traders are monitoring inflation data and central bank "
                    "announcements for market direction signals."
                ),
                "url": "#",
                "sourceName": "Market Intelligence",
                "publishedAt": now,
                "tickers": [],
            },
            derived_scores={
                "marketImpact": "medium",
                "sentiment": "neutral",
                "relatedAssets": [],
                "urgency": 0.5,
                "tradingImplications": ["Monitor economic calendar for data releases"],
            },
        ),
        Item(
            type=ItemType.ARTICLE,
            identity="fallback://technical-levels",
            source="fallback",
            payload={
                "title": "Technical Analysis: Major Support and Resistance Levels",
                "description": (
                    "Key technical levels being tested across major indices and currency "
                    "pairs in current session."
                ),
                "url": "#",
                "sourceName": "Technical Analysis",
                "publishedAt": now,
                "tickers": [],
            },
            derived_scores={
                "marketImpact": "low",
                "sentiment": "neutral",
                "relatedAssets": [],
                "urgency": 0.3,
                "tradingImplications": ["Review technical charts for entry/exit points"],
            },
        ),
    ]


def fallback_news(
    now: datetime,
    source_names: list[str],
    outcomes: Optional[list[SourceOutcome]] = None,
    error: str = FALLBACK_NEWS_ERROR,
) -> PipelineResult:
    """Fallback news result.

    `outcomes` are reported when the sources settled; otherwise every
    configured source is reported as failed.
    """
    if outcomes is None or len(outcomes) != len(source_names):
        outcomes = [SourceOutcome.failure(name, "aggregation_failed") for name in source_names]
    return PipelineResult(
        items=fallback_articles(now),
        source_outcomes=outcomes,
        generated_at=now,
        error=error,
    )


def fallback_ad() -> Item:
    """House ad used when no network can serve."""
    return Item(
        type=ItemType.AD_CREATIVE,
        identity="fallback",
        source="fallback",
        payload={
            "html": FALLBACK_AD_HTML,
            "revenueScore": 0.3,
            "loadTime": 100,
            "estimatedRevenue": 0,
        },
        derived_scores={"networkScore": 0.0},
    )
