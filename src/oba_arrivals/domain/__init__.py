"""Domain layer - core models, errors and ports."""

from oba_arrivals.domain.errors import InvalidQueryError, ObaArrivalsError, UpstreamError
from oba_arrivals.domain.models import (
    ArrivalRecord,
    PollResult,
    RawArrivalEntry,
    StopArrivals,
    StopQuery,
)
from oba_arrivals.domain.ports import ApiKeyStore, ArrivalsRepository, PollService

__all__ = [
    "ApiKeyStore",
    "ArrivalRecord",
    "ArrivalsRepository",
    "InvalidQueryError",
    "ObaArrivalsError",
    "PollResult",
    "PollService",
    "RawArrivalEntry",
    "StopArrivals",
    "StopQuery",
    "UpstreamError",
]
