"""Domain models for OBA arrivals."""

from oba_arrivals.domain.models.arrival_entry import RawArrivalEntry, StopArrivals
from oba_arrivals.domain.models.arrival_record import ArrivalRecord
from oba_arrivals.domain.models.outcome import Fulfilled, Outcome, Rejected
from oba_arrivals.domain.models.poll_result import PollResult
from oba_arrivals.domain.models.stop_query import StopQuery

__all__ = [
    "ArrivalRecord",
    "Fulfilled",
    "Outcome",
    "PollResult",
    "RawArrivalEntry",
    "Rejected",
    "StopArrivals",
    "StopQuery",
]
