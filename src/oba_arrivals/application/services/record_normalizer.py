"""Expands raw per-stop arrivals into display-ready records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from oba_arrivals.domain.models.arrival_record import ArrivalRecord

if TYPE_CHECKING:
    from oba_arrivals.domain.contracts import TimeFormatterProtocol
    from oba_arrivals.domain.models.arrival_entry import RawArrivalEntry, StopArrivals


def effective_arrival_time(entry: RawArrivalEntry) -> int:
    """Predicted arrival if present, otherwise the scheduled arrival.

    A predicted time of exactly 0 is the upstream "no prediction" sentinel.
    """
    if entry.has_prediction:
        return entry.predicted_arrival_time
    return entry.scheduled_arrival_time


def _delay_seconds(delay_unix: int) -> int | float:
    """Delay in seconds, whole seconds kept as an int."""
    if delay_unix % 1000 == 0:
        return delay_unix // 1000
    return delay_unix / 1000


class RecordNormalizer:
    """Turns a StopArrivals bundle into ArrivalRecords."""

    def __init__(self, time_formatter: TimeFormatterProtocol) -> None:
        """Initialize with the formatter used for time-of-day strings."""
        self._time_formatter = time_formatter

    def normalize_entry(
        self, entry: RawArrivalEntry, stop_name: str, timezone: str
    ) -> ArrivalRecord:
        """Build a single record from a raw entry."""
        effective_unix = effective_arrival_time(entry)
        delay_unix = effective_unix - entry.scheduled_arrival_time
        fmt = self._time_formatter.format_time

        return ArrivalRecord(
            last_update_time=fmt(entry.last_update_time, timezone),
            effective_arrival_time=fmt(effective_unix, timezone),
            predicted_arrival_time=fmt(entry.predicted_arrival_time, timezone),
            scheduled_arrival_time=fmt(entry.scheduled_arrival_time, timezone),
            last_update_time_unix=entry.last_update_time,
            effective_arrival_time_unix=effective_unix,
            predicted_arrival_time_unix=entry.predicted_arrival_time,
            scheduled_arrival_time_unix=entry.scheduled_arrival_time,
            route_id=entry.route_id,
            route_short_name=entry.route_short_name,
            route_long_name=entry.route_long_name,
            trip_headsign=entry.trip_headsign,
            status=entry.status,
            schedule_deviation=entry.schedule_deviation,
            predicted=entry.predicted,
            number_of_stops_away=entry.number_of_stops_away,
            stop_id=entry.stop_id,
            stop_name=stop_name,
            delay_unix=delay_unix,
            delay_seconds=_delay_seconds(delay_unix),
        )

    def normalize(self, stop_arrivals: StopArrivals, timezone: str) -> list[ArrivalRecord]:
        """Normalize every arrival of a stop, preserving upstream order."""
        return [
            self.normalize_entry(entry, stop_arrivals.stop_name, timezone)
            for entry in stop_arrivals.arrivals
        ]
