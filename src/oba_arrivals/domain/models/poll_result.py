"""Poll result domain model."""

from typing import Any

from pydantic import BaseModel, ConfigDict

from oba_arrivals.domain.models.arrival_record import ArrivalRecord


class PollResult(BaseModel):
    """Merged arrivals for a poll request plus the server time."""

    model_config = ConfigDict(frozen=True)

    arrivals_and_departures: list[ArrivalRecord]
    current_time: str

    def to_json_dict(self) -> dict[str, Any]:
        """Serialize to the response body shape."""
        return {
            "arrivalsAndDepartures": [
                record.to_json_dict() for record in self.arrivals_and_departures
            ],
            "currentTime": self.current_time,
        }
