"""Formatters for the web adapter."""

from oba_arrivals.adapters.web.formatters.time_formatter import LocaleTimeFormatter

__all__ = ["LocaleTimeFormatter"]
