"""Formatter for arrival times."""

from datetime import UTC, datetime
from functools import lru_cache
from zoneinfo import ZoneInfo

from oba_arrivals.domain.contracts.time_formatter import TimeFormatterProtocol


@lru_cache(maxsize=64)
def _zone(timezone: str) -> ZoneInfo:
    return ZoneInfo(timezone)


class LocaleTimeFormatter(TimeFormatterProtocol):
    """Renders epochs as US-English 12-hour times of day, e.g. '2:13:20 PM'."""

    def format_time(self, epoch_ms: int, timezone: str) -> str:
        """Format a millisecond epoch as a time of day in ``timezone``."""
        local = datetime.fromtimestamp(epoch_ms / 1000, tz=UTC).astimezone(_zone(timezone))
        return self.format_datetime(local)

    @staticmethod
    def format_datetime(value: datetime) -> str:
        """Format an aware datetime as 'h:mm:ss AM'."""
        # Built by hand so the output does not depend on the process locale
        hour = value.hour % 12 or 12
        meridiem = "AM" if value.hour < 12 else "PM"
        return f"{hour}:{value.minute:02d}:{value.second:02d} {meridiem}"
