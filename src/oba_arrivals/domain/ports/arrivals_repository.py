"""Arrivals repository port."""

from typing import Protocol

from oba_arrivals.domain.models.arrival_entry import StopArrivals


class ArrivalsRepository(Protocol):
    """Port for retrieving arrivals and departures for a single stop."""

    async def get_arrivals(
        self,
        stop_id: str,
        minutes_before: int,
        minutes_after: int,
        api_key: str,
    ) -> StopArrivals:
        """Get arrivals for a stop within the given time window.

        Raises:
            UpstreamError: If the stop could not be fetched or parsed.
        """
        ...
