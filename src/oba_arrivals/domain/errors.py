"""Domain errors."""


class ObaArrivalsError(Exception):
    """Base class for errors raised by the arrivals pipeline."""


class InvalidQueryError(ObaArrivalsError):
    """A required request parameter is missing or malformed."""


class UpstreamError(ObaArrivalsError):
    """Fetching arrivals for a single stop failed."""

    def __init__(self, stop_id: str, cause: BaseException | str) -> None:
        """Initialize with the failing stop and the underlying cause.

        Args:
            stop_id: Stop identifier whose fetch failed.
            cause: Underlying exception, or a message describing the failure.
        """
        self.stop_id = stop_id
        self.cause = cause
        super().__init__(f"Failed to fetch arrivals for stop '{stop_id}': {cause}")
