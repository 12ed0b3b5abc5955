"""Alpha Vantage news sentiment source."""

from market_pulse.adapters.sources.base import HttpNewsSource, parse_compact_timestamp
from market_pulse.core import Item, NewsRequest, NewsSourceId, SourceUnavailable


class AlphaVantageNewsSource(HttpNewsSource):
    """Fetch macro and markets news from Alpha Vantage NEWS_SENTIMENT."""

    source_id = NewsSourceId.ALPHA_VANTAGE.value
    base_url = "https://www.alphavantage.co/query"

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float = 5.0,
        max_items: int = 10,
        topics: str = "financial_markets,economy,fiscal_policy,monetary_policy",
    ) -> None:
        super().__init__(api_key=api_key, timeout=timeout, max_items=max_items)
        self.topics = topics

    async def fetch_items(self, request: NewsRequest) -> list[Item]:
        data = await self._get_json(
            self.base_url,
            params={
                "function": "NEWS_SENTIMENT",
                "apikey": self.api_key,
                "topics": self.topics,
                "limit": self.max_items,
            },
        )
        return self._parse_feed(data)

    def _parse_feed(self, data: dict) -> list[Item]:
        """Map the `feed` array to items.

        Alpha Vantage reports quota and key problems as a 200 with a
        `Note`/`Information` message instead of a feed.
        """
        if not isinstance(data, dict):
            raise SourceUnavailable("malformed_payload", "expected an object")
        if "feed" not in data:
            message = data.get("Note") or data.get("Information") or data.get("Error Message") or ""
            raise SourceUnavailable("upstream_error", message)

        items = []
        for entry in data["feed"][: self.max_items]:
            tickers = [t.get("ticker") for t in entry.get("ticker_sentiment") or [] if t.get("ticker")]
            item = self._article(
                title=entry.get("title"),
                url=entry.get("url"),
                description=entry.get("summary"),
                source_name=entry.get("source"),
                published_at=parse_compact_timestamp(entry.get("time_published")),
                tickers=tickers,
            )
            if item:
                item.payload["upstreamSentiment"] = entry.get("overall_sentiment_label")
                items.append(item)
        return items
