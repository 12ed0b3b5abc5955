"""Tests for article scoring and ranking."""

from datetime import datetime, timedelta, timezone

import pytest

from market_pulse.core import AggregationFailure, Item, ItemType
from market_pulse.core.scoring import SCORE_NAMES, MarketImpactScorer, summarize_market

NOW = datetime(2025, 3, 14, 15, 0, tzinfo=timezone.utc)


@pytest.fixture
def scorer() -> MarketImpactScorer:
    return MarketImpactScorer()


def article(title: str, description: str = "", hours_old: float = 0.0, url: str = "") -> Item:
    return Item(
        type=ItemType.ARTICLE,
        identity=url or f"https://news.example.com/{abs(hash(title))}",
        source="test",
        payload={
            "title": title,
            "description": description,
            "publishedAt": NOW - timedelta(hours=hours_old),
        },
    )


def test_market_impact_high_with_two_high_keywords(scorer: MarketImpactScorer) -> None:
    assert scorer.market_impact("Fed comments weigh on earnings season") == "high"


def test_market_impact_medium_with_single_high_keyword(scorer: MarketImpactScorer) -> None:
    assert scorer.market_impact("Quiet week ahead of earnings") == "medium"


def test_market_impact_medium_with_two_medium_keywords(scorer: MarketImpactScorer) -> None:
    assert scorer.market_impact("Analysts publish new outlook and forecast") == "medium"


def test_market_impact_low_without_keywords(scorer: MarketImpactScorer) -> None:
    assert scorer.market_impact("Local bakery opens second shop") == "low"


def test_sentiment_positive(scorer: MarketImpactScorer) -> None:
    assert scorer.sentiment("Shares surge as rally extends, bullish traders") == "positive"


def test_sentiment_negative(scorer: MarketImpactScorer) -> None:
    assert scorer.sentiment("Stocks plunge in bearish slump") == "negative"


def test_sentiment_neutral_when_balanced(scorer: MarketImpactScorer) -> None:
    assert scorer.sentiment("Bullish open, bearish close") == "neutral"


def test_related_assets(scorer: MarketImpactScorer) -> None:
    assets = scorer.related_assets("AAPL and NVDA rally while Bitcoin slips against the EUR")

    assert assets == [
        {"symbol": "AAPL", "type": "stock", "confidence": 0.9},
        {"symbol": "NVDA", "type": "stock", "confidence": 0.9},
        {"symbol": "BTC", "type": "crypto", "confidence": 0.8},
        {"symbol": "EUR", "type": "forex", "confidence": 0.7},
    ]


def test_related_assets_requires_whole_ticker(scorer: MarketImpactScorer) -> None:
    assets = scorer.related_assets("AAPLX is not a tracked ticker")

    assert all(a["type"] != "stock" for a in assets)


def test_related_assets_capped_at_five(scorer: MarketImpactScorer) -> None:
    assets = scorer.related_assets("AAPL MSFT TSLA META AMD IBM USD EUR")

    assert len(assets) == 5
    assert len({a["symbol"] for a in assets}) == 5


def test_related_assets_no_duplicates_for_repeated_mentions(scorer: MarketImpactScorer) -> None:
    assets = scorer.related_assets("TSLA beats, TSLA jumps, TSLA again")

    assert assets == [{"symbol": "TSLA", "type": "stock", "confidence": 0.9}]


def test_urgency_fresh_article(scorer: MarketImpactScorer) -> None:
    assert scorer.urgency("Markets steady", NOW, NOW) == pytest.approx(1.0)


def test_urgency_day_old_article(scorer: MarketImpactScorer) -> None:
    assert scorer.urgency("Markets steady", NOW - timedelta(hours=30), NOW) == pytest.approx(0.0)


def test_urgency_half_day(scorer: MarketImpactScorer) -> None:
    assert scorer.urgency("Markets steady", NOW - timedelta(hours=12), NOW) == pytest.approx(0.5)


def test_urgency_breaking_boost_is_clamped(scorer: MarketImpactScorer) -> None:
    assert scorer.urgency("BREAKING: rate decision", NOW, NOW) == pytest.approx(1.0)
    old = NOW - timedelta(hours=48)
    assert scorer.urgency("Breaking: rate decision", old, NOW) == pytest.approx(0.3)


def test_urgency_without_publish_time(scorer: MarketImpactScorer) -> None:
    assert scorer.urgency("Markets steady", None, NOW) == 0.0


def test_trading_implications(scorer: MarketImpactScorer) -> None:
    implications = scorer.trading_implications(
        "Federal Reserve signals patience as CPI cools; bitcoin steady"
    )

    assert implications == [
        "Monitor bond yields and currency pairs",
        "Watch gold, commodities, and inflation-protected securities",
        "Monitor cryptocurrency market sentiment and regulatory news",
    ]


def test_trading_implications_default(scorer: MarketImpactScorer) -> None:
    assert scorer.trading_implications("Nothing to see") == [
        "General market sentiment analysis recommended"
    ]


def test_score_populates_every_score(scorer: MarketImpactScorer) -> None:
    item = article("Fed holds rates", "Earnings season starts")

    scored = scorer.score(item, NOW)

    assert set(scored.derived_scores) == set(SCORE_NAMES)
    assert not item.is_scored


def test_score_is_deterministic(scorer: MarketImpactScorer) -> None:
    item = article("AAPL earnings beat as profit growth surges", hours_old=3)

    assert scorer.score(item, NOW).derived_scores == scorer.score(item, NOW).derived_scores


def test_score_rejects_article_without_title(scorer: MarketImpactScorer) -> None:
    item = Item(type=ItemType.ARTICLE, identity="https://x", source="test", payload={})

    with pytest.raises(AggregationFailure):
        scorer.score(item, NOW)


def test_score_and_rank_orders_by_impact_and_urgency(scorer: MarketImpactScorer) -> None:
    items = [
        article("Local bakery opens", hours_old=0, url="https://a"),
        article("Fed and earnings collide", hours_old=20, url="https://b"),
        article("Earnings preview", hours_old=0, url="https://c"),
        article("Fed and earnings again", hours_old=1, url="https://d"),
    ]

    ranked = scorer.score_and_rank(items, NOW)

    assert [i.identity for i in ranked] == ["https://d", "https://b", "https://c", "https://a"]


def test_score_and_rank_ties_keep_merge_order(scorer: MarketImpactScorer) -> None:
    items = [article("Quiet day", hours_old=30, url=f"https://{n}") for n in "abc"]

    ranked = scorer.score_and_rank(items, NOW)

    assert [i.identity for i in ranked] == ["https://a", "https://b", "https://c"]


def test_summarize_market(scorer: MarketImpactScorer) -> None:
    items = scorer.score_and_rank(
        [
            article("Fed earnings surge rally gain", url="https://1"),
            article("Fed merger profit rise", url="https://2"),
            article("Stocks plunge in bearish slump", url="https://3"),
        ],
        NOW,
    )

    summary = summarize_market(items, NOW)

    assert summary["overallSentiment"] == "positive"
    assert summary["marketImpactLevel"] == "medium"
    assert summary["newsVolume"] == 3
    assert summary["lastUpdated"] == NOW.isoformat()


def test_summarize_market_tie_is_neutral(scorer: MarketImpactScorer) -> None:
    items = scorer.score_and_rank(
        [
            article("Shares surge in rally", url="https://1"),
            article("Shares plunge in slump", url="https://2"),
        ],
        NOW,
    )

    summary = summarize_market(items, NOW)

    assert summary["overallSentiment"] == "neutral"
    assert summary["marketImpactLevel"] == "low"
