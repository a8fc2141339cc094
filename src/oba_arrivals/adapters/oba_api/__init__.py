"""OneBusAway API adapters."""

from oba_arrivals.adapters.oba_api.oba_arrivals_repository import ObaArrivalsRepository

__all__ = ["ObaArrivalsRepository"]
