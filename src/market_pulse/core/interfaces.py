"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from typing import Any

from market_pulse.core.entities import Item, PipelineResult


class ItemSource(ABC):
    """Interface for one upstream source.

    Implementations may raise freely from `fetch_items`; callers go through
    `market_pulse.core.pipeline.invoke_source`, which turns every failure
    into a `SourceOutcome`.
    """

    source_id: str = ""

    @abstractmethod
    async def fetch_items(self, request: Any) -> list[Item]:
        """Fetch and normalize items for the given request."""
        pass

    def is_configured(self, request: Any) -> bool:
        """Whether every credential the call needs is present."""
        return True


class BriefingGenerator(ABC):
    """Interface for rendering a ranked news result."""

    @abstractmethod
    def generate(self, result: PipelineResult) -> str:
        """Render the result."""
        pass
