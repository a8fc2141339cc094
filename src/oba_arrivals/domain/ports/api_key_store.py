"""API key store port."""

from typing import Protocol


class ApiKeyStore(Protocol):
    """Port for looking up the default transit API key."""

    async def get(self) -> str | None:
        """Return the configured API key, or None if none is set."""
        ...
