"""Raw arrival/departure entry as reported by the transit API."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RawArrivalEntry(BaseModel):
    """One upstream-reported vehicle arrival/departure for a stop.

    Epoch values are in milliseconds. A ``predicted_arrival_time`` of ``0``
    means the agency has no real-time prediction for this trip.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    stop_id: str
    route_id: str
    scheduled_arrival_time: int
    predicted_arrival_time: int = 0
    last_update_time: int = 0
    route_short_name: str = ""
    route_long_name: str = ""
    trip_headsign: str = ""
    status: str = ""  # SCHEDULED, IN_PROGRESS, COMPLETED, CANCELED, "default", ...
    schedule_deviation: int = 0  # Seconds, as reported upstream
    predicted: bool = False
    number_of_stops_away: int = Field(default=0)

    @property
    def has_prediction(self) -> bool:
        """Whether a real-time predicted arrival is available."""
        return self.predicted_arrival_time != 0


class StopArrivals(BaseModel):
    """Per-stop response bundle: the stop's display name and its arrivals."""

    model_config = ConfigDict(frozen=True)

    stop_id: str
    stop_name: str
    arrivals: list[RawArrivalEntry] = Field(default_factory=list)
