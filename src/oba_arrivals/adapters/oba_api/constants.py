"""Constants for the OneBusAway REST API."""

ARRIVALS_FOR_STOP_PATH = "/api/where/arrivals-and-departures-for-stop/{stop_id}.json"

# OBA wraps every response in an envelope whose "code" mirrors the HTTP status
OBA_CODE_OK = 200
