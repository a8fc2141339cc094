"""Protocol for rendering epoch timestamps as time-of-day strings."""

from typing import Protocol


class TimeFormatterProtocol(Protocol):
    """Protocol for formatting millisecond epochs in a time zone."""

    def format_time(self, epoch_ms: int, timezone: str) -> str:
        """Format a millisecond epoch as a time of day in ``timezone``."""
        ...
