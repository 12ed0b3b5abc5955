"""Tests for fan-out collection and merging."""

import asyncio
from unittest.mock import AsyncMock, Mock

import httpx
import pytest

from market_pulse.core import Item, ItemSource, ItemType, SourceOutcome, SourceUnavailable
from market_pulse.core.pipeline import collect_all, invoke_source, merge_unique


def make_item(url: str, source: str = "test") -> Item:
    return Item(type=ItemType.ARTICLE, identity=url, source=source, payload={"title": url})


class StubSource(ItemSource):
    """Source returning fixed items after an optional delay."""

    def __init__(self, source_id, items=None, delay=0.0, error=None, configured=True):
        self.source_id = source_id
        self.items = items or []
        self.delay = delay
        self.error = error
        self.configured = configured
        self.calls = 0

    def is_configured(self, request) -> bool:
        return self.configured

    async def fetch_items(self, request):
        self.calls += 1
        await asyncio.sleep(self.delay)
        if self.error:
            raise self.error
        return self.items


@pytest.mark.asyncio
async def test_invoke_source_success() -> None:
    source = StubSource("a", [make_item("https://a/1")])

    outcome = await invoke_source(source, None, timeout=1.0)

    assert outcome.succeeded
    assert outcome.source == "a"
    assert [i.identity for i in outcome.items] == ["https://a/1"]


@pytest.mark.asyncio
async def test_invoke_source_missing_config_skips_call() -> None:
    source = StubSource("a", configured=False)

    outcome = await invoke_source(source, None, timeout=1.0)

    assert not outcome.succeeded
    assert outcome.reason == "missing_config"
    assert source.calls == 0


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error, reason",
    [
        (SourceUnavailable("http_503"), "http_503"),
        (httpx.ConnectError("refused"), "network_error"),
        (httpx.ReadTimeout("slow"), "timeout"),
        (KeyError("articles"), "malformed_payload"),
        (RuntimeError("boom"), "error"),
    ],
)
async def test_invoke_source_failures_never_raise(error, reason) -> None:
    outcome = await invoke_source(StubSource("a", error=error), None, timeout=1.0)

    assert not outcome.succeeded
    assert outcome.reason == reason


@pytest.mark.asyncio
async def test_invoke_source_http_status_error() -> None:
    request = httpx.Request("GET", "https://example.com")
    response = httpx.Response(429, request=request)
    error = httpx.HTTPStatusError("rate limited", request=request, response=response)

    outcome = await invoke_source(StubSource("a", error=error), None, timeout=1.0)

    assert outcome.reason == "http_429"


@pytest.mark.asyncio
async def test_invoke_source_timeout() -> None:
    outcome = await invoke_source(StubSource("slow", delay=1.0), None, timeout=0.01)

    assert not outcome.succeeded
    assert outcome.reason == "timeout"


@pytest.mark.asyncio
async def test_invoke_source_rejects_non_list() -> None:
    source = Mock(spec=ItemSource)
    source.source_id = "odd"
    source.is_configured.return_value = True
    source.fetch_items = AsyncMock(return_value={"articles": []})

    outcome = await invoke_source(source, None, timeout=1.0)

    assert outcome.reason == "malformed_payload"


@pytest.mark.asyncio
async def test_collect_all_keeps_configuration_order() -> None:
    """Outcomes follow source order even when the first source finishes last."""
    sources = [
        StubSource("slow", [make_item("https://slow/1")], delay=0.05),
        StubSource("broken", error=RuntimeError("down")),
        StubSource("fast", [make_item("https://fast/1")]),
    ]

    outcomes = await collect_all(sources, None, timeout=1.0)

    assert [o.source for o in outcomes] == ["slow", "broken", "fast"]
    assert [o.succeeded for o in outcomes] == [True, False, True]
    assert all(s.calls == 1 for s in sources)


@pytest.mark.asyncio
async def test_collect_all_runs_concurrently() -> None:
    sources = [StubSource(f"s{i}", delay=0.1) for i in range(5)]

    loop = asyncio.get_running_loop()
    started = loop.time()
    outcomes = await collect_all(sources, None, timeout=1.0)
    elapsed = loop.time() - started

    assert len(outcomes) == 5
    assert elapsed < 0.4


@pytest.mark.asyncio
async def test_collect_all_disabled_sources_are_not_called() -> None:
    sources = [StubSource("a"), StubSource("b")]

    outcomes = await collect_all(sources, None, timeout=1.0, enabled=lambda s: s.source_id == "a")

    assert [o.succeeded for o in outcomes] == [True, False]
    assert outcomes[1].reason == "disabled"
    assert sources[1].calls == 0


def test_merge_unique_keeps_first_occurrence() -> None:
    outcomes = [
        SourceOutcome.success("primary", [make_item("https://x/1", "primary"), make_item("https://x/2", "primary")]),
        SourceOutcome.failure("down", "timeout"),
        SourceOutcome.success("secondary", [make_item("https://x/2", "secondary"), make_item("https://x/3", "secondary")]),
    ]

    merged = merge_unique(outcomes)

    assert [i.identity for i in merged] == ["https://x/1", "https://x/2", "https://x/3"]
    assert merged[1].source == "primary"
    assert len({i.identity for i in merged}) == len(merged)


def test_merge_unique_empty_when_all_failed() -> None:
    outcomes = [SourceOutcome.failure("a", "timeout"), SourceOutcome.failure("b", "missing_config")]

    assert merge_unique(outcomes) == []
