"""JSON response bodies for the pipeline endpoints."""

from datetime import datetime
from typing import Any

from market_pulse.core import Item, PerformanceTracker, PipelineResult
from market_pulse.core.scoring import summarize_market


def article_to_dict(item: Item) -> dict[str, Any]:
    payload = item.payload
    published_at = payload.get("publishedAt")
    body = {
        "title": payload["title"],
        "description": payload.get("description", ""),
        "url": payload.get("url", item.identity),
        "source": {"name": payload.get("sourceName", item.source)},
        "publishedAt": published_at.isoformat() if isinstance(published_at, datetime) else None,
        "tickers": payload.get("tickers", []),
    }
    body.update(item.derived_scores or {})
    return body


def news_body(result: PipelineResult) -> dict[str, Any]:
    articles = [article_to_dict(item) for item in result.items]
    body = {
        "articles": articles,
        "totalResults": len(articles),
        "sourcesUsed": result.sources_used,
        "analyzedAt": result.generated_at.isoformat(),
        "marketSummary": summarize_market(result.items, result.generated_at),
    }
    if result.error:
        body["error"] = result.error
    return body


def ad_body(result: PipelineResult, tracker: PerformanceTracker) -> dict[str, Any]:
    creative = result.items[0]
    body = {
        "success": True,
        "network": creative.identity,
        "html": creative.payload["html"],
        "revenueScore": creative.payload["revenueScore"],
        "loadTime": creative.payload["loadTime"],
        "estimatedRevenue": creative.payload["estimatedRevenue"],
        "revenueMetrics": tracker.snapshot(),
    }
    if result.error:
        body["error"] = result.error
    return body
