"""Typed schema for the arrivals-and-departures-for-stop response.

Only the fields the proxy consumes are modeled; everything else is ignored.

Envelope shape::

    {
      "code": 200,
      "currentTime": 1700000000000,
      "text": "OK",
      "version": 2,
      "data": {
        "entry": {"stopId": "1_100", "arrivalsAndDepartures": [...]},
        "references": {"stops": [{"id": "1_100", "name": "..."}], ...}
      }
    }
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from oba_arrivals.domain.models.arrival_entry import RawArrivalEntry


class _ObaModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class ObaStopReference(_ObaModel):
    """A stop in the response's references section."""

    id: str
    name: str


class ObaReferences(_ObaModel):
    """References section; only stops are needed."""

    stops: list[ObaStopReference] = Field(min_length=1)


class ObaArrivalsEntry(_ObaModel):
    """The entry for the requested stop."""

    stop_id: str | None = None
    arrivals_and_departures: list[RawArrivalEntry] = Field(default_factory=list)


class ObaArrivalsData(_ObaModel):
    """Data section of the envelope."""

    entry: ObaArrivalsEntry
    references: ObaReferences


class ObaArrivalsResponse(_ObaModel):
    """Response envelope of arrivals-and-departures-for-stop."""

    code: int
    text: str = ""
    current_time: int | None = None
    data: ObaArrivalsData | None = None

    def stop_name_for(self, stop_id: str) -> str:
        """Display name of ``stop_id``, falling back to the first referenced stop."""
        if self.data is None:
            raise ValueError("response has no data section")
        stops = self.data.references.stops
        for stop in stops:
            if stop.id == stop_id:
                return stop.name
        return stops[0].name
