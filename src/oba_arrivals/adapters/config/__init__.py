"""Configuration adapters."""

from oba_arrivals.adapters.config.api_key_store import ConfigApiKeyStore
from oba_arrivals.adapters.config.app_config import AppConfig

__all__ = ["AppConfig", "ConfigApiKeyStore"]
