"""Error taxonomy for the train search pipeline.

Every failure the core can report is one of the kinds in ``SearchErrorKind``.
Each kind has exactly one exception class, and each exception knows the
pipeline stage it belongs to, so callers can tell which step failed without
parsing messages.
"""

from enum import StrEnum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class SearchErrorKind(StrEnum):
    """Closed set of error kinds raised by the core."""

    DATA_LOAD = "data_load"
    INVALID_RECORD = "invalid_record"
    INVALID_TIME_FORMAT = "invalid_time_format"
    INVALID_NUMBER = "invalid_number"
    UNSUPPORTED_CRITERION = "unsupported_criterion"
    EMPTY_DEPARTURE_STATION = "empty_departure_station"
    EMPTY_ARRIVAL_STATION = "empty_arrival_station"
    MALFORMED_DEPARTURE_STATION = "malformed_departure_station"
    MALFORMED_ARRIVAL_STATION = "malformed_arrival_station"


class SearchStage(StrEnum):
    """Pipeline step in which an error was raised."""

    LOAD = "load"
    QUERY = "query"  # standalone query parsing, outside the pipeline
    SORT = "sort"
    DEPARTURE_STATION = "departure_station"
    ARRIVAL_STATION = "arrival_station"


class StationRole(StrEnum):
    """Which side of the journey a station identifier belongs to."""

    DEPARTURE = "departure"
    ARRIVAL = "arrival"


class ErrorDetails(BaseModel):
    """Structured description of a failed search, suitable for reporting."""

    model_config = ConfigDict(frozen=True)

    kind: SearchErrorKind
    stage: SearchStage
    reason: str
    value: str | None = None


class TrainSearchError(Exception):
    """Base class for all errors raised by the train search core."""

    kind: ClassVar[SearchErrorKind]
    stage: ClassVar[SearchStage]

    def __init__(self, message: str, *, value: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.value = value

    @property
    def details(self) -> ErrorDetails:
        """Return the error as an ``ErrorDetails`` model."""
        return ErrorDetails(
            kind=self.kind,
            stage=self.stage,
            reason=self.message,
            value=self.value,
        )


class DataLoadError(TrainSearchError):
    """The raw train collection could not be obtained."""

    kind = SearchErrorKind.DATA_LOAD
    stage = SearchStage.LOAD


class InvalidTimeFormatError(TrainSearchError):
    """A time-of-day string is not zero-padded 24-hour ``HH:MM:SS``."""

    kind = SearchErrorKind.INVALID_TIME_FORMAT
    stage = SearchStage.LOAD


class InvalidRecordError(TrainSearchError):
    """A raw train record is structurally malformed."""

    kind = SearchErrorKind.INVALID_RECORD
    stage = SearchStage.LOAD

    def __init__(
        self, message: str, *, value: str | None = None, index: int | None = None
    ) -> None:
        if index is not None:
            message = f"record #{index}: {message}"
        super().__init__(message, value=value)
        self.index = index


class InvalidNumberError(TrainSearchError):
    """A string is not a strictly positive decimal number."""

    kind = SearchErrorKind.INVALID_NUMBER
    stage = SearchStage.QUERY


class UnsupportedCriterionError(TrainSearchError):
    """The sort criterion token is not one of the recognized values."""

    kind = SearchErrorKind.UNSUPPORTED_CRITERION
    stage = SearchStage.SORT


class StationInputError(TrainSearchError):
    """Base class for invalid station identifiers in a query."""

    role: ClassVar[StationRole]


class EmptyDepartureStationError(StationInputError):
    """The departure station was not given."""

    kind = SearchErrorKind.EMPTY_DEPARTURE_STATION
    stage = SearchStage.DEPARTURE_STATION
    role = StationRole.DEPARTURE


class EmptyArrivalStationError(StationInputError):
    """The arrival station was not given."""

    kind = SearchErrorKind.EMPTY_ARRIVAL_STATION
    stage = SearchStage.ARRIVAL_STATION
    role = StationRole.ARRIVAL


class MalformedDepartureStationError(StationInputError):
    """The departure station is not a valid positive integer."""

    kind = SearchErrorKind.MALFORMED_DEPARTURE_STATION
    stage = SearchStage.DEPARTURE_STATION
    role = StationRole.DEPARTURE


class MalformedArrivalStationError(StationInputError):
    """The arrival station is not a valid positive integer."""

    kind = SearchErrorKind.MALFORMED_ARRIVAL_STATION
    stage = SearchStage.ARRIVAL_STATION
    role = StationRole.ARRIVAL


EMPTY_STATION_ERRORS: dict[StationRole, type[StationInputError]] = {
    StationRole.DEPARTURE: EmptyDepartureStationError,
    StationRole.ARRIVAL: EmptyArrivalStationError,
}

MALFORMED_STATION_ERRORS: dict[StationRole, type[StationInputError]] = {
    StationRole.DEPARTURE: MalformedDepartureStationError,
    StationRole.ARRIVAL: MalformedArrivalStationError,
}
