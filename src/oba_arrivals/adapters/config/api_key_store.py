"""API key store backed by application configuration."""

from oba_arrivals.adapters.config.app_config import AppConfig
from oba_arrivals.domain.ports.api_key_store import ApiKeyStore


class ConfigApiKeyStore(ApiKeyStore):
    """Reads the default API key from the OBA_API_KEY setting."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize with the application configuration."""
        self._config = config

    async def get(self) -> str | None:
        """Return the configured key, treating blank values as unset."""
        key = self._config.oba_api_key
        if key is None or not key.strip():
            return None
        return key.strip()
