"""Train domain model."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import time
from typing import Any

from pydantic import ValidationError

from train_search.domain import time_codec
from train_search.domain.errors import InvalidRecordError, InvalidTimeFormatError
from train_search.domain.models.train_record import TrainRecord


@dataclass(frozen=True)
class Train:
    """A scheduled train between two stations."""

    train_id: int
    departure_station_id: int
    arrival_station_id: int
    price: float
    departure_time: time
    arrival_time: time  # may be earlier than departure_time for overnight routes

    @classmethod
    def from_record(cls, data: Mapping[str, Any], index: int | None = None) -> "Train":
        """Build a Train from a raw record mapping.

        Args:
            data: Raw record with the dataset's camelCase keys.
            index: Position of the record in the dataset, used in error messages.

        Raises:
            InvalidRecordError: If a field is missing, has the wrong type, or a
                time does not decode.
        """
        if not isinstance(data, Mapping):
            raise InvalidRecordError(
                f"expected an object, got {type(data).__name__}", index=index
            )

        try:
            record = TrainRecord.model_validate(dict(data))
        except ValidationError as e:
            raise InvalidRecordError(_describe_validation_error(e), index=index) from e

        try:
            departure_time = time_codec.decode(record.departure_time)
            arrival_time = time_codec.decode(record.arrival_time)
        except InvalidTimeFormatError as e:
            raise InvalidRecordError(e.message, value=e.value, index=index) from e

        return cls(
            train_id=record.train_id,
            departure_station_id=record.departure_station_id,
            arrival_station_id=record.arrival_station_id,
            price=record.price,
            departure_time=departure_time,
            arrival_time=arrival_time,
        )

    def to_record(self) -> dict[str, Any]:
        """Return the wire mapping for this train, with times as ``HH:MM:SS``."""
        record = TrainRecord(
            train_id=self.train_id,
            departure_station_id=self.departure_station_id,
            arrival_station_id=self.arrival_station_id,
            price=self.price,
            arrival_time=time_codec.encode(self.arrival_time),
            departure_time=time_codec.encode(self.departure_time),
        )
        return record.model_dump(by_alias=True)


def _describe_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic ValidationError into a one-line message."""
    parts = []
    for item in error.errors():
        field = ".".join(str(loc) for loc in item["loc"]) or "record"
        parts.append(f"{field}: {item['msg']}")
    return "; ".join(parts)
