"""Shared plumbing for news source adapters."""

from datetime import datetime, timezone
from typing import Any, Optional

import httpx

from market_pulse.core import Item, ItemSource, ItemType, SourceUnavailable


class HttpNewsSource(ItemSource):
    """News source reached through one keyed HTTPS GET."""

    base_url = ""

    def __init__(self, api_key: Optional[str] = None, timeout: float = 5.0, max_items: int = 10) -> None:
        self.api_key = api_key
        self.timeout = timeout
        self.max_items = max_items

    def is_configured(self, request: Any) -> bool:
        return bool(self.api_key)

    async def _get_json(self, url: str, params: dict) -> Any:
        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            response = await client.get(url, params=params)

        if response.status_code != 200:
            raise SourceUnavailable(f"http_{response.status_code}", url)

        try:
            return response.json()
        except ValueError as e:
            raise SourceUnavailable("malformed_payload", str(e)) from e

    def _article(
        self,
        title: Optional[str],
        url: Optional[str],
        description: Optional[str],
        source_name: Optional[str],
        published_at: Optional[datetime],
        tickers: Optional[list[str]] = None,
    ) -> Optional[Item]:
        """Build an article item, or None when it lacks a URL or title."""
        if not url or not title:
            return None
        return Item(
            type=ItemType.ARTICLE,
            identity=url,
            source=self.source_id,
            payload={
                "title": title,
                "description": description or "",
                "url": url,
                "sourceName": source_name or self.source_id,
                "publishedAt": published_at,
                "tickers": tickers or [],
            },
        )


def parse_iso_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp such as `2024-01-15T12:30:00Z`."""
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_compact_timestamp(value: Any) -> Optional[datetime]:
    """Parse Alpha Vantage's `20240115T123000` format (UTC)."""
    if not isinstance(value, str) or not value:
        return None
    try:
        return datetime.strptime(value, "%Y%m%dT%H%M%S").replace(tzinfo=timezone.utc)
    except ValueError:
        return None


def parse_epoch(value: Any) -> Optional[datetime]:
    """Parse epoch seconds."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None
