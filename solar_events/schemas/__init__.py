from .solar import (
    AfternoonRequest,
    CrossingRequest,
    CrossingResponse,
    DayEventsRequest,
    DayEventsResponse,
    EventTime,
    PlaceOut,
    SolarMeta,
    SolarPlace,
    TwilightSafeguardRequest,
    TwilightSafeguardResponse,
)
