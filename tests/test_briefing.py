"""Tests for the markdown briefing generator."""

from datetime import datetime, timezone

from market_pulse.adapters.briefing import MarkdownBriefingGenerator
from market_pulse.core import Item, ItemType, PipelineResult
from market_pulse.core.fallback import fallback_news

NOW = datetime(2025, 3, 14, 15, 0, tzinfo=timezone.utc)


def scored(title: str, impact: str, assets=None) -> Item:
    return Item(
        type=ItemType.ARTICLE,
        identity=f"https://news.example.com/{impact}",
        source="newsapi",
        payload={
            "title": title,
            "description": f"{title} in detail",
            "url": f"https://news.example.com/{impact}",
            "sourceName": "Example Wire",
            "publishedAt": NOW,
        },
        derived_scores={
            "marketImpact": impact,
            "sentiment": "positive",
            "relatedAssets": assets or [],
            "urgency": 0.75,
            "tradingImplications": ["Monitor bond yields and currency pairs"],
        },
    )


def test_generate_groups_by_impact() -> None:
    """Test articles are grouped into impact sections in rank order."""
    result = PipelineResult(
        items=[
            scored("Fed holds rates", "high", [{"symbol": "USD", "type": "forex", "confidence": 0.7}]),
            scored("Bakery opens", "low"),
        ],
        source_outcomes=[],
        generated_at=NOW,
    )

    markdown = MarkdownBriefingGenerator().generate(result)

    assert markdown.startswith("# 📈 Market briefing 14.03.2025 15:00 UTC")
    assert "## 🔴 High impact" in markdown
    assert "## 🟠 Medium impact" not in markdown
    assert markdown.index("High impact") < markdown.index("Low impact")
    assert "### [Fed holds rates](https://news.example.com/high)" in markdown
    assert "**Urgency:** 75%" in markdown
    assert "*Example Wire | USD (forex)*" in markdown


def test_generate_shows_fallback_warning() -> None:
    markdown = MarkdownBriefingGenerator().generate(fallback_news(NOW, ["newsapi"]))

    assert "> ⚠️ Using fallback news data" in markdown
    assert "Key Economic Indicators" in markdown


def test_generate_empty_result() -> None:
    result = PipelineResult(items=[], source_outcomes=[], generated_at=NOW)

    assert "No articles available." in MarkdownBriefingGenerator().generate(result)


def test_generate_ends_with_market_summary() -> None:
    result = PipelineResult(
        items=[scored("Fed holds rates", "high"), scored("Bakery opens", "low")],
        source_outcomes=[],
        generated_at=NOW,
    )

    markdown = MarkdownBriefingGenerator().generate(result)

    assert markdown.index("## ⚪ Low impact") < markdown.index("## Market summary")
    assert markdown.endswith("Articles: 2 | Sentiment: positive | Impact level: low")
