"""Parsing and validation of /poll query parameters."""

from __future__ import annotations

from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from oba_arrivals.domain.errors import InvalidQueryError
from oba_arrivals.domain.models.stop_query import StopQuery

if TYPE_CHECKING:
    from collections.abc import Mapping

    from oba_arrivals.adapters.config.app_config import AppConfig
    from oba_arrivals.domain.ports import ApiKeyStore


def parse_stop_ids(raw: str | None) -> tuple[str, ...]:
    """Split a comma-separated stop list, dropping blank items."""
    if not raw:
        return ()
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def parse_minutes(params: Mapping[str, str], name: str, default: int) -> int:
    """Parse an optional non-negative integer parameter."""
    raw = params.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise InvalidQueryError(f"{name} must be a non-negative integer") from None
    if value < 0:
        raise InvalidQueryError(f"{name} must be a non-negative integer")
    return value


def parse_timezone(raw: str | None, default: str) -> str:
    """Return the requested timezone, or ``default`` if none was given."""
    timezone = raw.strip() if raw else ""
    if not timezone:
        return default
    try:
        ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError):
        raise InvalidQueryError(f"timezone is invalid: {timezone}") from None
    return timezone


async def parse_stop_query(
    params: Mapping[str, str],
    config: AppConfig,
    api_key_store: ApiKeyStore,
) -> StopQuery:
    """Build a StopQuery from request parameters.

    The API key falls back to the key store when the query does not carry one.

    Raises:
        InvalidQueryError: If stopIds or apiKey cannot be resolved, or a
            window/timezone value is malformed.
    """
    stop_ids = parse_stop_ids(params.get("stopIds"))
    if not stop_ids:
        raise InvalidQueryError("stopIds is required")

    api_key = (params.get("apiKey") or "").strip() or await api_key_store.get()
    if not api_key:
        raise InvalidQueryError(f'apiKey is required: "{api_key or ""}"')

    return StopQuery(
        stop_ids=stop_ids,
        minutes_before=parse_minutes(params, "minutesBefore", config.minutes_before),
        minutes_after=parse_minutes(params, "minutesAfter", config.minutes_after),
        api_key=api_key,
        timezone=parse_timezone(params.get("timezone"), config.timezone),
    )
