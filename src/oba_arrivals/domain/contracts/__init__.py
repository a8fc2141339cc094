"""Domain contracts (protocols) implemented by adapters."""

from oba_arrivals.domain.contracts.time_formatter import TimeFormatterProtocol

__all__ = ["TimeFormatterProtocol"]
