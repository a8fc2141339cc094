"""Display-ready arrival record domain model."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ArrivalRecord(BaseModel):
    """A normalized arrival/departure with derived delay and display times."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    # Human-readable times in the requested time zone
    last_update_time: str
    effective_arrival_time: str
    predicted_arrival_time: str
    scheduled_arrival_time: str

    # Millisecond epochs
    last_update_time_unix: int
    effective_arrival_time_unix: int
    predicted_arrival_time_unix: int
    scheduled_arrival_time_unix: int

    route_id: str
    route_short_name: str
    route_long_name: str
    trip_headsign: str
    status: str
    schedule_deviation: int
    predicted: bool
    number_of_stops_away: int
    stop_id: str
    stop_name: str

    delay_unix: int
    delay_seconds: int | float

    def to_json_dict(self) -> dict[str, Any]:
        """Serialize with the camelCase keys used on the wire."""
        return self.model_dump(by_alias=True)
