"""Poll use case: fan out, normalize, merge."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from oba_arrivals.application.services.fan_out_dispatcher import FanOutDispatcher
from oba_arrivals.application.services.merge_sort import merge_and_sort
from oba_arrivals.application.services.record_normalizer import RecordNormalizer
from oba_arrivals.domain.models.outcome import Fulfilled
from oba_arrivals.domain.models.poll_result import PollResult

if TYPE_CHECKING:
    from oba_arrivals.domain.contracts import TimeFormatterProtocol
    from oba_arrivals.domain.models.arrival_record import ArrivalRecord
    from oba_arrivals.domain.models.stop_query import StopQuery
    from oba_arrivals.domain.ports import ArrivalsRepository

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class ArrivalsPollService:
    """Runs the arrivals pipeline for a validated StopQuery."""

    def __init__(
        self,
        arrivals_repository: ArrivalsRepository,
        time_formatter: TimeFormatterProtocol,
        clock: Callable[[], int] = _now_ms,
    ) -> None:
        """Initialize the service.

        Args:
            arrivals_repository: Repository for per-stop upstream calls.
            time_formatter: Formatter for display times.
            clock: Returns the current time as a millisecond epoch.
        """
        self._dispatcher = FanOutDispatcher(arrivals_repository)
        self._normalizer = RecordNormalizer(time_formatter)
        self._time_formatter = time_formatter
        self._clock = clock

    async def poll(self, query: StopQuery) -> PollResult:
        """Fetch, normalize and merge arrivals for every stop in the query.

        Failed stops are excluded from the result; they never fail the poll.
        A stop whose arrivals cannot be normalized is treated as failed.
        """
        outcomes = await self._dispatcher.dispatch(
            query.stop_ids,
            minutes_before=query.minutes_before,
            minutes_after=query.minutes_after,
            api_key=query.api_key,
        )

        record_groups: list[list[ArrivalRecord]] = []
        for index, outcome in enumerate(outcomes):
            if not isinstance(outcome, Fulfilled):
                continue
            try:
                record_groups.append(self._normalizer.normalize(outcome.value, query.timezone))
            except (ValueError, OverflowError, OSError) as e:
                # Epochs the formatter cannot represent drop only this stop
                logger.error(f"Error index {index} stop {outcome.stop_id}: {e}")
        records = merge_and_sort(record_groups)
        logger.debug(
            f"Merged {len(records)} arrivals from {len(record_groups)}/{len(outcomes)} stop(s)"
        )

        return PollResult(
            arrivals_and_departures=records,
            current_time=self._time_formatter.format_time(self._clock(), query.timezone),
        )
