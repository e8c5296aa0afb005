"""Tests for the error taxonomy."""

import pytest

from train_search.domain.errors import (
    DataLoadError,
    EmptyArrivalStationError,
    EmptyDepartureStationError,
    ErrorDetails,
    InvalidNumberError,
    InvalidRecordError,
    MalformedArrivalStationError,
    MalformedDepartureStationError,
    SearchErrorKind,
    SearchStage,
    StationRole,
    TrainSearchError,
    UnsupportedCriterionError,
)


@pytest.mark.parametrize(
    ("error_class", "kind", "stage"),
    [
        (DataLoadError, SearchErrorKind.DATA_LOAD, SearchStage.LOAD),
        (InvalidRecordError, SearchErrorKind.INVALID_RECORD, SearchStage.LOAD),
        (UnsupportedCriterionError, SearchErrorKind.UNSUPPORTED_CRITERION, SearchStage.SORT),
        (
            EmptyDepartureStationError,
            SearchErrorKind.EMPTY_DEPARTURE_STATION,
            SearchStage.DEPARTURE_STATION,
        ),
        (
            MalformedDepartureStationError,
            SearchErrorKind.MALFORMED_DEPARTURE_STATION,
            SearchStage.DEPARTURE_STATION,
        ),
        (
            EmptyArrivalStationError,
            SearchErrorKind.EMPTY_ARRIVAL_STATION,
            SearchStage.ARRIVAL_STATION,
        ),
        (
            MalformedArrivalStationError,
            SearchErrorKind.MALFORMED_ARRIVAL_STATION,
            SearchStage.ARRIVAL_STATION,
        ),
    ],
)
def test_each_error_has_kind_and_stage(
    error_class: type[TrainSearchError], kind: SearchErrorKind, stage: SearchStage
) -> None:
    """Given an error class, when instantiated, then it reports its kind and stage."""
    error = error_class("boom")

    assert isinstance(error, TrainSearchError)
    assert error.kind == kind
    assert error.stage == stage
    assert str(error) == "boom"


def test_station_errors_know_their_role() -> None:
    """Given station errors, when inspected, then they report the station role."""
    assert EmptyDepartureStationError.role == StationRole.DEPARTURE
    assert MalformedArrivalStationError.role == StationRole.ARRIVAL


def test_details_returns_structured_model() -> None:
    """Given an error with a value, when reading details, then an ErrorDetails model is returned."""
    error = MalformedDepartureStationError("bad departure station input '12a'", value="12a")

    details = error.details

    assert details == ErrorDetails(
        kind=SearchErrorKind.MALFORMED_DEPARTURE_STATION,
        stage=SearchStage.DEPARTURE_STATION,
        reason="bad departure station input '12a'",
        value="12a",
    )
    assert details.model_dump(mode="json")["kind"] == "malformed_departure_station"


def test_error_details_is_frozen() -> None:
    """Given ErrorDetails, when modifying a field, then a validation error is raised."""
    details = DataLoadError("missing").details

    with pytest.raises(ValueError):
        details.reason = "changed"  # type: ignore[misc]


def test_invalid_record_error_prefixes_index() -> None:
    """Given a record index, when creating InvalidRecordError, then the message names the record."""
    error = InvalidRecordError("price: field required", index=4)

    assert str(error) == "record #4: price: field required"
    assert error.index == 4


def test_invalid_number_error_belongs_to_query_stage() -> None:
    """Given a standalone parser error, when inspected, then it reports the query stage."""
    details = InvalidNumberError("bad number '12a'", value="12a").details

    assert details.kind == SearchErrorKind.INVALID_NUMBER
    assert details.stage == SearchStage.QUERY
