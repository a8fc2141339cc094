"""OneBusAway REST API arrivals repository adapter.

Uses the arrivals-and-departures-for-stop endpoint:
https://developer.onebusaway.org/api/where/methods/arrivals-and-departures-for-stop
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp
from pydantic import ValidationError

from oba_arrivals.adapters.api_request_logger import log_api_request
from oba_arrivals.adapters.oba_api.constants import ARRIVALS_FOR_STOP_PATH, OBA_CODE_OK
from oba_arrivals.adapters.oba_api.schema import ObaArrivalsResponse
from oba_arrivals.domain.errors import UpstreamError
from oba_arrivals.domain.models.arrival_entry import StopArrivals
from oba_arrivals.domain.ports.arrivals_repository import ArrivalsRepository

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

logger = logging.getLogger(__name__)


class ObaArrivalsRepository(ArrivalsRepository):
    """Adapter fetching per-stop arrivals from the OneBusAway REST API."""

    def __init__(
        self,
        session: ClientSession,
        base_url: str = "https://api.pugetsound.onebusaway.org",
        timeout_seconds: int = 10,
    ) -> None:
        """Initialize the repository.

        Args:
            session: Shared aiohttp session for HTTP connections.
            base_url: Base URL of the OBA deployment (no trailing slash).
            timeout_seconds: Total timeout per request; 0 disables the timeout.
        """
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds or None)

    def _url_for(self, stop_id: str) -> str:
        return self._base_url + ARRIVALS_FOR_STOP_PATH.format(stop_id=stop_id)

    async def _read_payload(self, response: ClientResponse, stop_id: str) -> Any:
        """Read the JSON body, rejecting non-200 HTTP statuses."""
        if response.status != 200:
            response_text = await response.text()
            raise UpstreamError(
                stop_id,
                f"OneBusAway API returned status {response.status}: {response_text[:200]}",
            )
        # OBA sometimes answers with text/plain content type
        return await response.json(content_type=None)

    def _parse_payload(self, payload: Any, stop_id: str) -> StopArrivals:
        """Validate the envelope and build the per-stop bundle."""
        try:
            parsed = ObaArrivalsResponse.model_validate(payload)
        except ValidationError as e:
            raise UpstreamError(stop_id, e) from e

        if parsed.code != OBA_CODE_OK or parsed.data is None:
            raise UpstreamError(
                stop_id, f"OneBusAway API returned code {parsed.code}: {parsed.text}"
            )

        return StopArrivals(
            stop_id=stop_id,
            stop_name=parsed.stop_name_for(stop_id),
            arrivals=parsed.data.entry.arrivals_and_departures,
        )

    async def get_arrivals(
        self,
        stop_id: str,
        minutes_before: int,
        minutes_after: int,
        api_key: str,
    ) -> StopArrivals:
        """Get arrivals and departures for a stop.

        Args:
            stop_id: Agency-prefixed stop identifier, e.g. "1_100".
            minutes_before: Include vehicles that arrived up to this many minutes ago.
            minutes_after: Include vehicles arriving up to this many minutes from now.
            api_key: OneBusAway API key.

        Returns:
            The stop's display name and its raw arrivals, in upstream order.

        Raises:
            UpstreamError: On network errors, timeouts, error statuses or
                malformed responses.
        """
        url = self._url_for(stop_id)
        params: dict[str, str | int] = {
            "key": api_key,
            "minutesBefore": minutes_before,
            "minutesAfter": minutes_after,
        }
        log_api_request("GET", url, params=params)

        try:
            async with self._session.get(url, params=params, timeout=self._timeout) as response:
                payload = await self._read_payload(response, stop_id)
        except UpstreamError:
            raise
        except asyncio.TimeoutError as e:
            raise UpstreamError(stop_id, "request timed out") from e
        except (aiohttp.ClientError, ValueError) as e:
            # ValueError covers bodies that are not valid JSON
            raise UpstreamError(stop_id, e) from e

        stop_arrivals = self._parse_payload(payload, stop_id)
        logger.debug(f"Fetched {len(stop_arrivals.arrivals)} arrivals for stop {stop_id}")
        return stop_arrivals
