"""Settled outcome of a single per-stop fetch."""

from dataclasses import dataclass

from oba_arrivals.domain.models.arrival_entry import StopArrivals


@dataclass(frozen=True)
class Fulfilled:
    """The fetch for ``stop_id`` succeeded."""

    stop_id: str
    value: StopArrivals


@dataclass(frozen=True)
class Rejected:
    """The fetch for ``stop_id`` failed with ``cause``."""

    stop_id: str
    cause: BaseException


Outcome = Fulfilled | Rejected
