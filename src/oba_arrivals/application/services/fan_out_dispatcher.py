"""Concurrent per-stop fetch with settle-all semantics."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from oba_arrivals.domain.models.outcome import Fulfilled, Outcome, Rejected

if TYPE_CHECKING:
    from collections.abc import Sequence

    from oba_arrivals.domain.ports import ArrivalsRepository

logger = logging.getLogger(__name__)


class FanOutDispatcher:
    """Issues one repository call per stop concurrently and collects every outcome."""

    def __init__(self, arrivals_repository: ArrivalsRepository) -> None:
        """Initialize with the repository used for each per-stop call."""
        self._arrivals_repository = arrivals_repository

    async def _settle(
        self,
        stop_id: str,
        minutes_before: int,
        minutes_after: int,
        api_key: str,
    ) -> Outcome:
        """Run a single fetch, converting any failure into a Rejected outcome."""
        try:
            value = await self._arrivals_repository.get_arrivals(
                stop_id,
                minutes_before=minutes_before,
                minutes_after=minutes_after,
                api_key=api_key,
            )
        except Exception as e:
            return Rejected(stop_id=stop_id, cause=e)
        return Fulfilled(stop_id=stop_id, value=value)

    async def dispatch(
        self,
        stop_ids: Sequence[str],
        minutes_before: int,
        minutes_after: int,
        api_key: str,
    ) -> list[Outcome]:
        """Fetch all stops concurrently and wait for every call to settle.

        A failing stop never cancels its siblings. The returned list holds
        exactly one outcome per input stop id, in input order.
        """
        logger.info(f"Processing stopIds: {','.join(stop_ids)}")
        outcomes: list[Outcome] = await asyncio.gather(
            *(
                self._settle(stop_id, minutes_before, minutes_after, api_key)
                for stop_id in stop_ids
            )
        )

        for index, outcome in enumerate(outcomes):
            if isinstance(outcome, Rejected):
                logger.error(
                    f"Error index {index} stop {outcome.stop_id}: {outcome.cause}",
                )
        return outcomes
