"""NewsAPI top headlines source."""

import math

from market_pulse.adapters.sources.base import HttpNewsSource, parse_iso_timestamp
from market_pulse.core import Item, NewsRequest, NewsSourceId, SourceUnavailable


class NewsAPISource(HttpNewsSource):
    """Fetch market-related top headlines from NewsAPI."""

    source_id = NewsSourceId.NEWSAPI.value
    base_url = "https://newsapi.org/v2"

    def __init__(
        self,
        api_key: str | None = None,
        timeout: float = 5.0,
        query: str = "stock OR crypto OR forex OR trading OR market OR federal OR earnings",
    ) -> None:
        super().__init__(api_key=api_key, timeout=timeout)
        self.query = query

    async def fetch_items(self, request: NewsRequest) -> list[Item]:
        """Fetch headlines, asking for half of the page size."""
        data = await self._get_json(
            f"{self.base_url}/top-headlines",
            params={
                "category": request.category,
                "language": "en",
                "pageSize": math.ceil(request.page_size / 2),
                "apiKey": self.api_key,
                "q": self.query,
            },
        )
        return self._parse_articles(data)

    def _parse_articles(self, data: dict) -> list[Item]:
        """Map NewsAPI articles to items."""
        if not isinstance(data, dict):
            raise SourceUnavailable("malformed_payload", "expected an object")
        if data.get("status") == "error":
            raise SourceUnavailable("upstream_error", data.get("message", ""))

        items = []
        for article in data.get("articles") or []:
            source = article.get("source") or {}
            item = self._article(
                title=article.get("title"),
                url=article.get("url"),
                description=article.get("description"),
                source_name=source.get("name"),
                published_at=parse_iso_timestamp(article.get("publishedAt")),
            )
            if item:
                items.append(item)
        return items
