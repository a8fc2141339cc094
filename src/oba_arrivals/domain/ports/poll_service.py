"""Poll service port."""

from typing import Protocol

from oba_arrivals.domain.models.poll_result import PollResult
from oba_arrivals.domain.models.stop_query import StopQuery


class PollService(Protocol):
    """Port for running the arrivals pipeline for a query."""

    async def poll(self, query: StopQuery) -> PollResult:
        """Fetch, normalize and merge arrivals for every stop in the query."""
        ...
