"""Pass-through clients for single-upstream market data endpoints."""

import logging
from typing import Any, Optional

import httpx

from market_pulse.config import Settings
from market_pulse.core import UpstreamError

logger = logging.getLogger(__name__)


class MarketDataClient:
    """Thin wrappers over Alpha Vantage, NewsAPI and Finnhub.

    Every method returns the upstream JSON unchanged and raises
    `UpstreamError` on any failure.
    """

    alpha_vantage_url = "https://www.alphavantage.co/query"
    newsapi_url = "https://newsapi.org/v2/top-headlines"
    finnhub_url = "https://finnhub.io/api/v1"

    def __init__(self, settings: Settings, timeout: Optional[float] = None) -> None:
        self.settings = settings
        self.timeout = timeout or settings.request_timeout

    async def stock_quote(self, symbol: str) -> Any:
        """Latest quote for a symbol."""
        return await self._get(
            self.alpha_vantage_url,
            {"function": "GLOBAL_QUOTE", "symbol": symbol, "apikey": self.settings.alpha_vantage_key},
        )

    async def headlines(self, category: str = "business") -> Any:
        """Top headlines for a category."""
        return await self._get(
            self.newsapi_url,
            {"category": category, "language": "en", "apiKey": self.settings.news_api_key},
        )

    async def forex_rate(self, from_currency: str = "EUR", to_currency: str = "USD") -> Any:
        """Realtime exchange rate for a currency pair."""
        return await self._get(
            self.alpha_vantage_url,
            {
                "function": "CURRENCY_EXCHANGE_RATE",
                "from_currency": from_currency,
                "to_currency": to_currency,
                "apikey": self.settings.alpha_vantage_key,
            },
        )

    async def recommendations(self, symbol: str) -> Any:
        """Analyst recommendation trends for a symbol."""
        return await self._get(
            f"{self.finnhub_url}/stock/recommendation",
            {"symbol": symbol, "token": self.settings.finnhub_key},
        )

    async def _get(self, url: str, params: dict) -> Any:
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPError as e:
            logger.error("Upstream call to %s failed: %s", url, e)
            raise UpstreamError(str(e)) from e
        except ValueError as e:
            logger.error("Upstream %s returned invalid JSON: %s", url, e)
            raise UpstreamError(str(e)) from e
