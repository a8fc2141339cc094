"""Tests for the OneBusAway arrivals repository adapter."""

import asyncio
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from oba_arrivals.adapters.oba_api import ObaArrivalsRepository
from oba_arrivals.domain.errors import UpstreamError

BASE_URL = "https://oba.example.org"


def _payload(stop_id: str = "1_100", stops: list[dict[str, str]] | None = None) -> dict[str, Any]:
    return {
        "code": 200,
        "currentTime": 1_700_000_000_000,
        "text": "OK",
        "version": 2,
        "data": {
            "entry": {
                "stopId": stop_id,
                "arrivalsAndDepartures": [
                    {
                        "stopId": stop_id,
                        "routeId": "1_100224",
                        "routeShortName": "372",
                        "routeLongName": "U-District Station - Lake City",
                        "tripId": "1_604318666",
                        "tripHeadsign": "Lake City",
                        "scheduledArrivalTime": 1_700_000_000_000,
                        "predictedArrivalTime": 1_700_000_060_000,
                        "lastUpdateTime": 1_699_999_990_000,
                        "status": "default",
                        "scheduleDeviation": 60,
                        "predicted": True,
                        "numberOfStopsAway": 4,
                        "distanceFromStop": 1234.5,
                    }
                ],
            },
            "references": {
                "stops": stops
                if stops is not None
                else [{"id": stop_id, "name": "Pine St & 3rd Ave", "lat": 47.6, "lon": -122.3}],
                "routes": [],
                "agencies": [],
            },
        },
    }


class _ResponseContext:
    """Async context manager standing in for aiohttp's request context."""

    def __init__(self, response: MagicMock) -> None:
        self.response = response

    async def __aenter__(self) -> MagicMock:
        return self.response

    async def __aexit__(self, *exc_info: object) -> bool:
        return False


def _session_returning(status: int = 200, payload: Any = None, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status = status
    response.json = AsyncMock(return_value=payload)
    response.text = AsyncMock(return_value=text)
    session = MagicMock()
    session.get = MagicMock(return_value=_ResponseContext(response))
    return session


@pytest.mark.asyncio
async def test_when_response_ok_then_returns_stop_name_and_entries() -> None:
    """Given a valid OBA envelope, when fetching, then the stop bundle is returned."""
    session = _session_returning(payload=_payload())
    repo = ObaArrivalsRepository(session=session, base_url=BASE_URL)

    result = await repo.get_arrivals("1_100", minutes_before=5, minutes_after=30, api_key="k")

    assert result.stop_id == "1_100"
    assert result.stop_name == "Pine St & 3rd Ave"
    [entry] = result.arrivals
    assert entry.scheduled_arrival_time == 1_700_000_000_000
    assert entry.predicted_arrival_time == 1_700_000_060_000
    assert entry.predicted is True
    assert entry.number_of_stops_away == 4


@pytest.mark.asyncio
async def test_when_fetching_then_calls_arrivals_endpoint_with_window_and_key() -> None:
    """Given a stop and window, when fetching, then the OBA endpoint and params are used."""
    session = _session_returning(payload=_payload())
    repo = ObaArrivalsRepository(session=session, base_url=BASE_URL + "/")

    await repo.get_arrivals("1_100", minutes_before=2, minutes_after=45, api_key="secret")

    args, kwargs = session.get.call_args
    assert args[0] == f"{BASE_URL}/api/where/arrivals-and-departures-for-stop/1_100.json"
    assert kwargs["params"] == {"key": "secret", "minutesBefore": 2, "minutesAfter": 45}


@pytest.mark.asyncio
async def test_when_several_stops_referenced_then_matching_stop_name_is_used() -> None:
    """Given references listing another stop first, then the requested stop's name wins."""
    stops = [{"id": "1_999", "name": "Nearby"}, {"id": "1_100", "name": "Requested"}]
    session = _session_returning(payload=_payload(stops=stops))
    repo = ObaArrivalsRepository(session=session, base_url=BASE_URL)

    result = await repo.get_arrivals("1_100", 5, 30, "k")

    assert result.stop_name == "Requested"


@pytest.mark.asyncio
async def test_when_requested_stop_not_referenced_then_first_stop_name_is_used() -> None:
    """Given references without the requested id, then the first name is used."""
    stops = [{"id": "1_999", "name": "First"}, {"id": "1_998", "name": "Second"}]
    session = _session_returning(payload=_payload(stops=stops))
    repo = ObaArrivalsRepository(session=session, base_url=BASE_URL)

    result = await repo.get_arrivals("1_100", 5, 30, "k")

    assert result.stop_name == "First"


@pytest.mark.asyncio
async def test_when_http_status_not_ok_then_raises_upstream_error() -> None:
    """Given an HTTP 401, when fetching, then UpstreamError carries the stop id."""
    session = _session_returning(status=401, text="permission denied")
    repo = ObaArrivalsRepository(session=session, base_url=BASE_URL)

    with pytest.raises(UpstreamError, match="status 401") as exc_info:
        await repo.get_arrivals("1_100", 5, 30, "bad-key")

    assert exc_info.value.stop_id == "1_100"


@pytest.mark.asyncio
async def test_when_envelope_code_not_ok_then_raises_upstream_error() -> None:
    """Given an OBA envelope with code 404, when fetching, then UpstreamError is raised."""
    session = _session_returning(payload={"code": 404, "text": "resource not found"})
    repo = ObaArrivalsRepository(session=session, base_url=BASE_URL)

    with pytest.raises(UpstreamError, match="code 404: resource not found"):
        await repo.get_arrivals("1_404", 5, 30, "k")


@pytest.mark.asyncio
async def test_when_entry_is_malformed_then_raises_typed_parse_error() -> None:
    """Given an arrival without scheduledArrivalTime, when fetching, then parsing fails fast."""
    payload = _payload()
    del payload["data"]["entry"]["arrivalsAndDepartures"][0]["scheduledArrivalTime"]
    session = _session_returning(payload=payload)
    repo = ObaArrivalsRepository(session=session, base_url=BASE_URL)

    with pytest.raises(UpstreamError, match="scheduledArrivalTime"):
        await repo.get_arrivals("1_100", 5, 30, "k")


@pytest.mark.asyncio
async def test_when_no_stop_references_then_raises_upstream_error() -> None:
    """Given an empty references.stops list, when fetching, then UpstreamError is raised."""
    session = _session_returning(payload=_payload(stops=[]))
    repo = ObaArrivalsRepository(session=session, base_url=BASE_URL)

    with pytest.raises(UpstreamError):
        await repo.get_arrivals("1_100", 5, 30, "k")


@pytest.mark.asyncio
async def test_when_connection_fails_then_raises_upstream_error() -> None:
    """Given a network error, when fetching, then it is wrapped in UpstreamError."""
    session = MagicMock()
    session.get = MagicMock(side_effect=aiohttp.ClientConnectionError("connection refused"))
    repo = ObaArrivalsRepository(session=session, base_url=BASE_URL)

    with pytest.raises(UpstreamError, match="connection refused") as exc_info:
        await repo.get_arrivals("1_100", 5, 30, "k")

    assert isinstance(exc_info.value.cause, aiohttp.ClientConnectionError)


@pytest.mark.asyncio
async def test_when_request_times_out_then_raises_upstream_error() -> None:
    """Given a timeout, when fetching, then UpstreamError reports it."""
    session = MagicMock()
    session.get = MagicMock(side_effect=asyncio.TimeoutError())
    repo = ObaArrivalsRepository(session=session, base_url=BASE_URL, timeout_seconds=1)

    with pytest.raises(UpstreamError, match="timed out"):
        await repo.get_arrivals("1_100", 5, 30, "k")


@pytest.mark.asyncio
async def test_when_body_is_not_json_then_raises_upstream_error() -> None:
    """Given a non-JSON body, when fetching, then UpstreamError is raised."""
    response = MagicMock()
    response.status = 200
    response.json = AsyncMock(side_effect=ValueError("Expecting value"))
    session = MagicMock()
    session.get = MagicMock(return_value=_ResponseContext(response))
    repo = ObaArrivalsRepository(session=session, base_url=BASE_URL)

    with pytest.raises(UpstreamError, match="Expecting value"):
        await repo.get_arrivals("1_100", 5, 30, "k")


def test_when_timeout_is_zero_then_no_total_timeout_is_set() -> None:
    """Given timeout 0, when constructing, then the request timeout is disabled."""
    repo = ObaArrivalsRepository(session=MagicMock(), base_url=BASE_URL, timeout_seconds=0)

    assert repo._timeout.total is None
