"""Fan-out collection and merging shared by both pipelines."""

import asyncio
import logging
from typing import Any, Callable, Optional

import httpx

from market_pulse.core.entities import Item, SourceOutcome
from market_pulse.core.errors import SourceUnavailable
from market_pulse.core.interfaces import ItemSource

logger = logging.getLogger(__name__)


def source_name(source: ItemSource) -> str:
    return getattr(source, "source_id", "") or source.__class__.__name__


async def invoke_source(source: ItemSource, request: Any, timeout: float) -> SourceOutcome:
    """Call one source and settle it. Never raises."""
    name = source_name(source)

    if not source.is_configured(request):
        logger.debug("%s skipped: missing configuration", name)
        return SourceOutcome.failure(name, "missing_config")

    try:
        items = await asyncio.wait_for(source.fetch_items(request), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning("%s timed out after %.1fs", name, timeout)
        return SourceOutcome.failure(name, "timeout")
    except SourceUnavailable as e:
        logger.warning("%s unavailable: %s", name, e)
        return SourceOutcome.failure(name, e.reason)
    except httpx.HTTPStatusError as e:
        logger.warning("%s returned HTTP %s", name, e.response.status_code)
        return SourceOutcome.failure(name, f"http_{e.response.status_code}")
    except httpx.TimeoutException:
        logger.warning("%s timed out", name)
        return SourceOutcome.failure(name, "timeout")
    except httpx.RequestError as e:
        logger.warning("%s network error: %s", name, e)
        return SourceOutcome.failure(name, "network_error")
    except (KeyError, TypeError, ValueError) as e:
        logger.warning("%s returned a malformed payload: %s", name, e)
        return SourceOutcome.failure(name, "malformed_payload")
    except Exception as e:
        logger.warning("%s failed: %s: %s", name, type(e).__name__, e)
        return SourceOutcome.failure(name, "error")

    if not isinstance(items, list):
        logger.warning("%s returned %s instead of a list", name, type(items).__name__)
        return SourceOutcome.failure(name, "malformed_payload")

    logger.debug("%s returned %d items", name, len(items))
    return SourceOutcome.success(name, items)


async def collect_all(
    sources: list[ItemSource],
    request: Any,
    timeout: float,
    enabled: Optional[Callable[[ItemSource], bool]] = None,
) -> list[SourceOutcome]:
    """Invoke every source concurrently and wait for all of them to settle.

    Outcomes come back in the order of `sources`, not completion order.
    Sources rejected by `enabled` settle as `disabled` without being called.
    """

    async def run(source: ItemSource) -> SourceOutcome:
        if enabled is not None and not enabled(source):
            return SourceOutcome.failure(source_name(source), "disabled")
        return await invoke_source(source, request, timeout)

    results = await asyncio.gather(
        *(run(source) for source in sources), return_exceptions=True
    )

    outcomes: list[SourceOutcome] = []
    for source, result in zip(sources, results):
        if isinstance(result, BaseException):
            if not isinstance(result, Exception):
                raise result
            logger.warning("%s crashed: %s", source_name(source), result)
            outcomes.append(SourceOutcome.failure(source_name(source), "error"))
        else:
            outcomes.append(result)
    return outcomes


def merge_unique(outcomes: list[SourceOutcome]) -> list[Item]:
    """Merge successful outcomes, keeping the first item for each identity."""
    merged: list[Item] = []
    seen: set[str] = set()

    for outcome in outcomes:
        if not outcome.succeeded:
            continue
        for item in outcome.items:
            if item.identity in seen:
                continue
            seen.add(item.identity)
            merged.append(item)

    return merged
