"""Merge per-stop records into one time-ordered list."""

from collections.abc import Iterable
from itertools import chain

from oba_arrivals.domain.models.arrival_record import ArrivalRecord


def merge_and_sort(record_groups: Iterable[Iterable[ArrivalRecord]]) -> list[ArrivalRecord]:
    """Concatenate record groups and sort ascending by effective arrival time.

    The sort is stable: records with equal arrival times keep their
    encounter order (dispatch order, then per-stop order).
    """
    merged = list(chain.from_iterable(record_groups))
    merged.sort(key=lambda record: record.effective_arrival_time_unix)
    return merged
