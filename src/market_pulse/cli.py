"""CLI entry point for market pulse."""

import asyncio
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from market_pulse.adapters.ads import build_ad_networks
from market_pulse.adapters.briefing import MarkdownBriefingGenerator
from market_pulse.adapters.sources import build_news_sources
from market_pulse.api import health_body
from market_pulse.config import get_settings
from market_pulse.core import AdRequest, NewsRequest, PerformanceTracker
from market_pulse.core.scoring import MarketImpactScorer
from market_pulse.presenters import ad_body
from market_pulse.use_cases import AdSelectionService, NewsAggregationService

app = typer.Typer(help="Market news aggregation and ad network selection.")


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")) -> None:
    """Configure logging for every command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def serve(host: str = "0.0.0.0", port: int = 8000) -> None:
    """Serve the HTTP endpoints."""
    import uvicorn

    uvicorn.run("market_pulse.api:create_app", host=host, port=port, factory=True)


@app.command()
def news(
    category: Optional[str] = None,
    page_size: Optional[int] = typer.Option(None, "--page-size"),
    sources: str = "all",
    output: Optional[Path] = None,
) -> None:
    """Aggregate market news once and print the ranked briefing."""
    asyncio.run(async_news(category, page_size, sources, output))


async def async_news(
    category: Optional[str], page_size: Optional[int], sources: str, output: Optional[Path]
) -> None:
    """Async implementation of news command."""
    settings = get_settings()

    print("\n" + "=" * 70)
    print("📈 MARKET PULSE - News aggregation")
    print("=" * 70)

    print("\n🔑 Credentials:")
    for name, status in settings.service_status().items():
        mark = "✓" if status == "operational" else "✗"
        print(f"  {mark} {name}")

    service = NewsAggregationService(
        sources=build_news_sources(settings),
        scorer=MarketImpactScorer(settings.scoring),
        timeout=settings.request_timeout,
    )
    request = NewsRequest(
        category=category or settings.default_category,
        page_size=page_size or settings.default_page_size,
        sources=sources,
    )

    result = await service.aggregate(request)

    print("\n📡 Sources:")
    for outcome in result.source_outcomes:
        if outcome.succeeded:
            print(f"  ✓ {outcome.source}: {len(outcome.items)} articles")
        else:
            print(f"  ✗ {outcome.source}: {outcome.reason}")

    if result.error:
        print(f"\n⚠️  {result.error}")

    print(f"\n📰 Ranked articles ({len(result.items)}):")
    for i, item in enumerate(result.items, 1):
        scores = item.derived_scores
        print(f"\n  [{i}] {item.payload['title'][:70]}")
        print(f"  └─ impact: {scores['marketImpact']} | sentiment: {scores['sentiment']} | urgency: {scores['urgency']:.2f}")

    if output is None:
        return

    briefing = MarkdownBriefingGenerator().generate(result)
    if output.is_dir():
        output = output / f"{datetime.now().strftime('%Y-%m-%d_%H-%M-%S')}_briefing.md"
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(briefing, encoding="utf-8")
    print(f"\n📄 Briefing saved to {output}")


@app.command()
def ad(ad_type: str = typer.Option("banner", "--type"), placement: str = "header") -> None:
    """Select an ad once and print the response body."""
    settings = get_settings()
    service = AdSelectionService(
        networks=build_ad_networks(settings),
        tracker=PerformanceTracker(),
        config=settings.ads,
        timeout=settings.request_timeout,
    )
    result = asyncio.run(service.select(AdRequest(ad_type=ad_type, placement=placement)))

    print("\n📡 Networks:")
    for outcome in result.source_outcomes:
        mark = "✓" if outcome.succeeded else "✗"
        print(f"  {mark} {outcome.source}{'' if outcome.succeeded else f': {outcome.reason}'}")

    print(json.dumps(ad_body(result, service.tracker), indent=2))


@app.command()
def health() -> None:
    """Print credential status."""
    print(json.dumps(health_body(get_settings()), indent=2))


if __name__ == "__main__":
    app()
