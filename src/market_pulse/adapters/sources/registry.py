"""Registry of news sources in configuration order."""

from market_pulse.adapters.sources.alpha_vantage_source import AlphaVantageNewsSource
from market_pulse.adapters.sources.cryptocompare_source import CryptoCompareNewsSource
from market_pulse.adapters.sources.finnhub_source import FinnhubNewsSource
from market_pulse.adapters.sources.newsapi_source import NewsAPISource
from market_pulse.config import Settings
from market_pulse.core import ItemSource, NewsSourceId

NEWS_SOURCES: dict[NewsSourceId, type] = {
    NewsSourceId.NEWSAPI: NewsAPISource,
    NewsSourceId.ALPHA_VANTAGE: AlphaVantageNewsSource,
    NewsSourceId.FINNHUB: FinnhubNewsSource,
    NewsSourceId.CRYPTOCOMPARE: CryptoCompareNewsSource,
}


def build_news_sources(settings: Settings) -> list[ItemSource]:
    """Instantiate every news source with its credential."""
    timeout = settings.request_timeout
    max_items = settings.news.max_items_per_source
    return [
        NEWS_SOURCES[NewsSourceId.NEWSAPI](
            api_key=settings.news_api_key,
            timeout=timeout,
            query=settings.news.newsapi_query,
        ),
        NEWS_SOURCES[NewsSourceId.ALPHA_VANTAGE](
            api_key=settings.alpha_vantage_key,
            timeout=timeout,
            max_items=max_items,
            topics=settings.news.alpha_vantage_topics,
        ),
        NEWS_SOURCES[NewsSourceId.FINNHUB](
            api_key=settings.finnhub_key,
            timeout=timeout,
            max_items=max_items,
        ),
        NEWS_SOURCES[NewsSourceId.CRYPTOCOMPARE](
            api_key=settings.cryptocompare_api_key,
            timeout=timeout,
            max_items=max_items,
        ),
    ]
