"""Error taxonomy."""


class SourceUnavailable(Exception):
    """An upstream source could not deliver usable items."""

    def __init__(self, reason: str, detail: str = "") -> None:
        super().__init__(f"{reason}: {detail}" if detail else reason)
        self.reason = reason
        self.detail = detail


class AggregationFailure(Exception):
    """Merging or scoring produced an inconsistent result."""


class UpstreamError(Exception):
    """A pass-through upstream call failed."""
