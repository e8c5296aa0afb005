"""Wire shape of a train record as it appears in the dataset."""

from pydantic import BaseModel, ConfigDict, Field


class TrainRecord(BaseModel):
    """Raw train record, with times still in their ``HH:MM:SS`` text form.

    Field types are checked strictly: station ids and the train id must be
    integers (booleans are rejected) and times must be strings.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        populate_by_name=True,
        extra="ignore",
    )

    train_id: int = Field(alias="trainId")
    departure_station_id: int = Field(alias="departureStationId", gt=0)
    arrival_station_id: int = Field(alias="arrivalStationId", gt=0)
    price: float = Field(ge=0)
    arrival_time: str = Field(alias="arrivalTime")
    departure_time: str = Field(alias="departureTime")
