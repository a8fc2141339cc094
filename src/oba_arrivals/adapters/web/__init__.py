"""Web adapter (Starlette) for the arrivals proxy."""

from oba_arrivals.adapters.web.app import ArrivalsWebAdapter, RequestLoggingMiddleware

__all__ = ["ArrivalsWebAdapter", "RequestLoggingMiddleware"]
