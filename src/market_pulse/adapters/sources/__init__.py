"""News source adapters."""

from market_pulse.adapters.sources.alpha_vantage_source import AlphaVantageNewsSource
from market_pulse.adapters.sources.cryptocompare_source import CryptoCompareNewsSource
from market_pulse.adapters.sources.finnhub_source import FinnhubNewsSource
from market_pulse.adapters.sources.newsapi_source import NewsAPISource
from market_pulse.adapters.sources.registry import NEWS_SOURCES, build_news_sources

__all__ = [
    "NewsAPISource",
    "AlphaVantageNewsSource",
    "FinnhubNewsSource",
    "CryptoCompareNewsSource",
    "NEWS_SOURCES",
    "build_news_sources",
]
