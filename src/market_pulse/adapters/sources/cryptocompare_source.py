"""CryptoCompare news source."""

from market_pulse.adapters.sources.base import HttpNewsSource, parse_epoch
from market_pulse.core import Item, NewsRequest, NewsSourceId, SourceUnavailable


class CryptoCompareNewsSource(HttpNewsSource):
    """Fetch crypto market news from CryptoCompare."""

    source_id = NewsSourceId.CRYPTOCOMPARE.value
    base_url = "https://min-api.cryptocompare.com/data/v2"

    async def fetch_items(self, request: NewsRequest) -> list[Item]:
        data = await self._get_json(
            f"{self.base_url}/news/",
            params={"lang": "EN", "api_key": self.api_key},
        )
        return self._parse_news(data)

    def _parse_news(self, data: dict) -> list[Item]:
        if not isinstance(data, dict) or not isinstance(data.get("Data"), list):
            message = data.get("Message", "") if isinstance(data, dict) else ""
            raise SourceUnavailable("malformed_payload", message)

        items = []
        for entry in data["Data"][: self.max_items]:
            source_info = entry.get("source_info") or {}
            item = self._article(
                title=entry.get("title"),
                url=entry.get("url"),
                description=entry.get("body"),
                source_name=source_info.get("name") or entry.get("source"),
                published_at=parse_epoch(entry.get("published_on")),
            )
            if item:
                items.append(item)
        return items
