"""Finnhub general market news source."""

from market_pulse.adapters.sources.base import HttpNewsSource, parse_epoch
from market_pulse.core import Item, NewsRequest, NewsSourceId, SourceUnavailable


class FinnhubNewsSource(HttpNewsSource):
    """Fetch general market news from Finnhub."""

    source_id = NewsSourceId.FINNHUB.value
    base_url = "https://finnhub.io/api/v1"

    async def fetch_items(self, request: NewsRequest) -> list[Item]:
        data = await self._get_json(
            f"{self.base_url}/news",
            params={"category": "general", "token": self.api_key},
        )
        return self._parse_news(data)

    def _parse_news(self, data: list) -> list[Item]:
        if not isinstance(data, list):
            raise SourceUnavailable("malformed_payload", "expected a list")

        items = []
        for entry in data[: self.max_items]:
            related = entry.get("related") or ""
            item = self._article(
                title=entry.get("headline"),
                url=entry.get("url"),
                description=entry.get("summary"),
                source_name=entry.get("source"),
                published_at=parse_epoch(entry.get("datetime")),
                tickers=[t.strip() for t in related.split(",") if t.strip()],
            )
            if item:
                items.append(item)
        return items
