"""Keyword heuristics for market news articles."""

import re
from dataclasses import replace
from datetime import datetime
from typing import Optional

from market_pulse.config import ScoringConfig
from market_pulse.core.entities import Item
from market_pulse.core.errors import AggregationFailure
from market_pulse.core.keywords import contains_any, count_matches

SCORE_NAMES = (
    "marketImpact",
    "sentiment",
    "relatedAssets",
    "urgency",
    "tradingImplications",
)

TICKER_PATTERN = re.compile(r"\b([A-Z]{1,5})\b")


def article_text(item: Item) -> str:
    """Title and description joined, as scored."""
    title = item.payload.get("title")
    if not isinstance(title, str) or not title:
        raise AggregationFailure(f"Article {item.identity} has no title")
    description = item.payload.get("description") or ""
    return f"{title} {description}"


class MarketImpactScorer:
    """Attach market impact, sentiment, assets, urgency and advice to articles.

    Every score is a pure function of the article content and `now`.
    """

    def __init__(self, config: Optional[ScoringConfig] = None) -> None:
        self.config = config or ScoringConfig()

    def market_impact(self, text: str) -> str:
        high = count_matches(text, self.config.high_impact_keywords)
        medium = count_matches(text, self.config.medium_impact_keywords)

        if high >= self.config.high_impact_threshold:
            return "high"
        if high >= 1 or medium >= self.config.medium_impact_threshold:
            return "medium"
        return "low"

    def sentiment(self, text: str) -> str:
        score = count_matches(text, self.config.positive_words) - count_matches(
            text, self.config.negative_words
        )

        if score >= self.config.sentiment_threshold:
            return "positive"
        if score <= -self.config.sentiment_threshold:
            return "negative"
        return "neutral"

    def related_assets(self, text: str) -> list[dict]:
        content = text.upper()
        assets: list[dict] = []
        seen: set[tuple[str, str]] = set()

        def add(symbol: str, asset_type: str, confidence: float) -> None:
            if (symbol, asset_type) in seen:
                return
            seen.add((symbol, asset_type))
            assets.append({"symbol": symbol, "type": asset_type, "confidence": confidence})

        for mention in TICKER_PATTERN.findall(content):
            if mention in self.config.stock_symbols:
                add(mention, "stock", self.config.stock_confidence)

        for symbol, names in self.config.crypto_names.items():
            if any(name.upper() in content for name in names):
                add(symbol, "crypto", self.config.crypto_confidence)

        for currency in self.config.currency_codes:
            if currency.upper() in content:
                add(currency, "forex", self.config.forex_confidence)

        return assets[: self.config.max_related_assets]

    def urgency(self, title: str, published_at: Optional[datetime], now: datetime) -> float:
        window = self.config.urgency_window_hours
        if published_at is None:
            score = 0.0
        else:
            hours = (now - published_at).total_seconds() / 3600
            score = max(0.0, window - hours) / window

        if contains_any(title, self.config.breaking_keywords):
            score += self.config.breaking_boost

        return min(1.0, score)

    def trading_implications(self, text: str) -> list[str]:
        implications = [
            rule["advice"]
            for rule in self.config.trading_implications
            if contains_any(text, rule["keywords"])
        ]
        return implications or [self.config.default_implication]

    def score(self, item: Item, now: datetime) -> Item:
        """Return a copy of the article with every derived score set."""
        text = article_text(item)
        published_at = item.payload.get("publishedAt")
        if published_at is not None and not isinstance(published_at, datetime):
            raise AggregationFailure(f"Article {item.identity} has an invalid publish time")

        scores = {
            "marketImpact": self.market_impact(text),
            "sentiment": self.sentiment(text),
            "relatedAssets": self.related_assets(text),
            "urgency": self.urgency(item.payload["title"], published_at, now),
            "tradingImplications": self.trading_implications(text),
        }
        return replace(item, derived_scores=scores)

    def rank_key(self, item: Item) -> float:
        if not item.is_scored:
            raise AggregationFailure(f"Article {item.identity} was not scored")
        weight = self.config.impact_weights[item.derived_scores["marketImpact"]]
        return weight + item.derived_scores["urgency"]

    def score_and_rank(self, items: list[Item], now: datetime) -> list[Item]:
        """Score every article, then order by impact weight plus urgency."""
        scored = [self.score(item, now) for item in items]
        if any(not item.is_scored or set(item.derived_scores) != set(SCORE_NAMES) for item in scored):
            raise AggregationFailure("Scoring left an article incomplete")
        return sorted(scored, key=self.rank_key, reverse=True)


def summarize_market(items: list[Item], now: datetime) -> dict:
    """Aggregate sentiment and impact level over scored articles."""
    high_impact = sum(1 for i in items if i.derived_scores["marketImpact"] == "high")
    positive = sum(1 for i in items if i.derived_scores["sentiment"] == "positive")
    negative = sum(1 for i in items if i.derived_scores["sentiment"] == "negative")

    if positive > negative:
        overall = "positive"
    elif negative > positive:
        overall = "negative"
    else:
        overall = "neutral"

    if high_impact > 3:
        level = "high"
    elif high_impact > 1:
        level = "medium"
    else:
        level = "low"

    return {
        "overallSentiment": overall,
        "marketImpactLevel": level,
        "newsVolume": len(items),
        "lastUpdated": now.isoformat(),
    }
