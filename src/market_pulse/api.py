"""HTTP endpoints."""

import logging
import time
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Query, Request, Response
from fastapi.responses import JSONResponse

from market_pulse.adapters.ads import build_ad_networks
from market_pulse.adapters.market_data import MarketDataClient
from market_pulse.adapters.sources import build_news_sources
from market_pulse.config import Settings, get_settings
from market_pulse.core import AdRequest, NewsRequest, PerformanceTracker, UpstreamError
from market_pulse.core.scoring import MarketImpactScorer
from market_pulse.presenters import ad_body, news_body
from market_pulse.use_cases import AdSelectionService, NewsAggregationService

logger = logging.getLogger(__name__)

PROCESS_STARTED = time.monotonic()
CACHE_CONTROL = "max-age=300"
SLUG = r"^[A-Za-z0-9_-]{1,32}$"
SYMBOL = r"^[A-Za-z0-9.:-]{1,16}$"


def create_app(
    settings: Optional[Settings] = None,
    news_service: Optional[NewsAggregationService] = None,
    ad_service: Optional[AdSelectionService] = None,
    market_data: Optional[MarketDataClient] = None,
) -> FastAPI:
    """Build the application. Collaborators default to ones built from settings."""
    settings = settings or get_settings()

    if news_service is None:
        news_service = NewsAggregationService(
            sources=build_news_sources(settings),
            scorer=MarketImpactScorer(settings.scoring),
            timeout=settings.request_timeout,
        )
    if ad_service is None:
        ad_service = AdSelectionService(
            networks=build_ad_networks(settings),
            tracker=PerformanceTracker(),
            config=settings.ads,
            timeout=settings.request_timeout,
        )
    market_data = market_data or MarketDataClient(settings)

    app = FastAPI(title="Market Pulse")

    # Set on every response, including ones to requests without an Origin header
    @app.middleware("http")
    async def allow_any_origin(request: Request, call_next):
        response = await call_next(request)
        response.headers["Access-Control-Allow-Origin"] = "*"
        return response

    @app.get("/news")
    async def news(
        response: Response,
        category: str = Query(settings.default_category),
        page_size: Optional[str] = Query(None, alias="pageSize"),
        sources: str = Query("all"),
    ):
        request = NewsRequest(
            category=category or settings.default_category,
            page_size=parse_page_size(page_size, settings.default_page_size),
            sources=sources or "all",
        )
        result = await news_service.aggregate(request)
        response.headers["Cache-Control"] = CACHE_CONTROL
        return news_body(result)

    @app.get("/ad")
    async def ad(
        response: Response,
        ad_type: str = Query("banner", alias="type", pattern=SLUG),
        placement: str = Query("header", pattern=SLUG),
        user_preference: Optional[str] = Query(None, alias="userPreference", max_length=64),
    ):
        result = await ad_service.select(
            AdRequest(ad_type=ad_type, placement=placement, user_preference=user_preference)
        )
        response.headers["Cache-Control"] = CACHE_CONTROL
        return ad_body(result, ad_service.tracker)

    @app.get("/stock")
    async def stock(symbol: str = Query(..., pattern=SYMBOL)):
        return await _pass_through(market_data.stock_quote(symbol), "stock data")

    @app.get("/headlines")
    async def headlines(category: str = Query("business")):
        return await _pass_through(market_data.headlines(category), "news")

    @app.get("/forex")
    async def forex(
        from_currency: str = Query("EUR", alias="from", pattern=r"^[A-Za-z]{3}$"),
        to_currency: str = Query("USD", alias="to", pattern=r"^[A-Za-z]{3}$"),
    ):
        return await _pass_through(
            market_data.forex_rate(from_currency.upper(), to_currency.upper()), "forex data"
        )

    @app.get("/recommendations")
    async def recommendations(symbol: str = Query(..., pattern=SYMBOL)):
        return await _pass_through(market_data.recommendations(symbol), "recommendations")

    @app.get("/health")
    async def health():
        return health_body(settings)

    return app


def parse_page_size(raw: Optional[str], default: int) -> int:
    """Positive integer page size; anything else falls back to the default."""
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


async def _pass_through(call, what: str):
    try:
        return await call
    except UpstreamError:
        return JSONResponse(status_code=500, content={"error": f"Failed to fetch {what}"})


def health_body(settings: Settings) -> dict:
    services = settings.service_status()
    operational = sum(1 for status in services.values() if status == "operational")
    return {
        "status": "healthy" if operational == len(services) else "degraded",
        "services": services,
        "uptime": time.monotonic() - PROCESS_STARTED,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
