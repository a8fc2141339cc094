"""Domain ports (interfaces) for the ports-and-adapters architecture."""

from oba_arrivals.domain.ports.api_key_store import ApiKeyStore
from oba_arrivals.domain.ports.arrivals_repository import ArrivalsRepository
from oba_arrivals.domain.ports.poll_service import PollService

__all__ = [
    "ApiKeyStore",
    "ArrivalsRepository",
    "PollService",
]
