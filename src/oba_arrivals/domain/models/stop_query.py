"""Stop query domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StopQuery:
    """A validated request for arrivals at one or more stops."""

    stop_ids: tuple[str, ...]  # Agency-prefixed, e.g. "1_100"
    minutes_before: int
    minutes_after: int
    api_key: str
    timezone: str  # IANA zone name used for display strings

    def __post_init__(self) -> None:
        if not self.stop_ids or any(not stop_id for stop_id in self.stop_ids):
            raise ValueError("stop_ids must contain at least one non-empty stop identifier")
        if self.minutes_before < 0 or self.minutes_after < 0:
            raise ValueError("minutes_before and minutes_after must be non-negative")
