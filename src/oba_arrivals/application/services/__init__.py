"""Application services (use cases) for the arrivals pipeline."""

from oba_arrivals.application.services.fan_out_dispatcher import FanOutDispatcher
from oba_arrivals.application.services.merge_sort import merge_and_sort
from oba_arrivals.application.services.poll_service import ArrivalsPollService
from oba_arrivals.application.services.record_normalizer import (
    RecordNormalizer,
    effective_arrival_time,
)

__all__ = [
    "ArrivalsPollService",
    "FanOutDispatcher",
    "RecordNormalizer",
    "effective_arrival_time",
    "merge_and_sort",
]
