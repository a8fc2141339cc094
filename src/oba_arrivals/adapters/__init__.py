"""Adapters layer - external system integrations."""

from oba_arrivals.adapters.config import AppConfig, ConfigApiKeyStore
from oba_arrivals.adapters.oba_api import ObaArrivalsRepository

__all__ = [
    "AppConfig",
    "ConfigApiKeyStore",
    "ObaArrivalsRepository",
]
