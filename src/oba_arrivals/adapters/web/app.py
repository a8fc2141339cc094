"""Starlette web adapter exposing the /poll endpoint."""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from oba_arrivals.adapters.config import ConfigApiKeyStore
from oba_arrivals.adapters.web.request_parser import parse_stop_query
from oba_arrivals.domain.errors import InvalidQueryError

if TYPE_CHECKING:
    import uvicorn
    from starlette.requests import Request

    from oba_arrivals.adapters.config import AppConfig
    from oba_arrivals.domain.ports import ApiKeyStore, PollService

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status and elapsed time of every request."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Time the request and log the outcome."""
        start = time.perf_counter()
        response: Response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
        )
        return response


class ArrivalsWebAdapter:
    """HTTP surface around the arrivals poll service."""

    def __init__(
        self,
        poll_service: PollService,
        config: AppConfig,
        api_key_store: ApiKeyStore | None = None,
    ) -> None:
        """Initialize the web adapter.

        Args:
            poll_service: Service running the arrivals pipeline.
            config: Application configuration.
            api_key_store: Source of the default API key. Defaults to the
                OBA_API_KEY setting.
        """
        self.poll_service = poll_service
        self.config = config
        self.api_key_store = api_key_store or ConfigApiKeyStore(config)
        self._server: uvicorn.Server | None = None

    async def poll(self, request: Request) -> Response:
        """Handle GET /poll."""
        try:
            query = await parse_stop_query(request.query_params, self.config, self.api_key_store)
        except InvalidQueryError as e:
            return JSONResponse({"error": str(e)}, status_code=400)

        result = await self.poll_service.poll(query)
        return JSONResponse(result.to_json_dict())

    async def favicon(self, _request: Request) -> Response:
        """Handle GET /favicon.ico."""
        return JSONResponse({}, status_code=404)

    async def healthz(self, _request: Request) -> Response:
        """Health check endpoint for load balancers and monitoring."""
        return Response(content="Ok", media_type="text/plain")

    async def not_found(self, _request: Request, _exc: Any) -> Response:
        """Answer any unrouted path."""
        return JSONResponse({"error": "Not found"}, status_code=404)

    def create_app(self) -> Starlette:
        """Create the Starlette application."""
        return Starlette(
            routes=[
                Route("/poll", self.poll, methods=["GET"]),
                Route("/favicon.ico", self.favicon, methods=["GET"]),
                Route("/healthz", self.healthz, methods=["GET"]),
            ],
            middleware=[Middleware(RequestLoggingMiddleware)],
            exception_handlers={404: self.not_found},
        )

    async def start(self) -> None:
        """Start the web server and serve until stopped."""
        import uvicorn

        config = uvicorn.Config(
            self.create_app(),
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level.lower(),
        )
        self._server = uvicorn.Server(config)
        logger.info(f"Serving arrivals on http://{self.config.host}:{self.config.port}/poll")
        await self._server.serve()

    async def stop(self) -> None:
        """Stop the web server."""
        if self._server:
            self._server.should_exit = True
