"""Train search use case: load, sort, validate, filter and cap."""

import logging
from collections.abc import Iterable

from train_search.application.services.train_sorter import TrainSorter
from train_search.domain import natural_number
from train_search.domain.errors import (
    EMPTY_STATION_ERRORS,
    MALFORMED_STATION_ERRORS,
    DataLoadError,
    InvalidNumberError,
    StationRole,
    TrainSearchError,
)
from train_search.domain.models import SearchQuery, SortCriterion, Train
from train_search.domain.ports import TrainRepository

logger = logging.getLogger(__name__)

MAX_RESULTS = 3


class TrainSearchService:
    """Finds the best trains between two stations."""

    def __init__(
        self, train_repository: TrainRepository, filter_before_sort: bool = False
    ) -> None:
        """Initialize with a train repository.

        Args:
            train_repository: Source of raw train records.
            filter_before_sort: Sort only the trains matching the station pair
                instead of the whole dataset. The result is the same either way;
                this only pays off for large datasets.
        """
        self._train_repository = train_repository
        self._filter_before_sort = filter_before_sort

    def find_trains(self, query: SearchQuery) -> list[Train]:
        """Run a search and return up to ``MAX_RESULTS`` trains in criterion order.

        Steps run in a fixed order and the first failure is raised:
        loading, sorting (criterion check), departure station, arrival station.
        An empty list means no train serves the station pair.
        """
        trains = self._load_trains()

        if self._filter_before_sort:
            return self._filter_then_sort(trains, query)

        ordered = TrainSorter.sort_by_criterion(trains, query.criterion)
        departure_id = parse_station_id(query.departure_station, StationRole.DEPARTURE)
        arrival_id = parse_station_id(query.arrival_station, StationRole.ARRIVAL)

        result = select_trains(ordered, departure_id, arrival_id)
        logger.debug(
            f"Found {len(result)} train(s) from station {query.departure_station!r} "
            f"to station {query.arrival_station!r}"
        )
        return result

    def _filter_then_sort(self, trains: list[Train], query: SearchQuery) -> list[Train]:
        """Optimized path: validate the criterion, filter, then sort only the matches."""
        criterion = SortCriterion.parse(query.criterion)
        departure_id = parse_station_id(query.departure_station, StationRole.DEPARTURE)
        arrival_id = parse_station_id(query.arrival_station, StationRole.ARRIVAL)

        matches = [
            train
            for train in trains
            if train.departure_station_id == departure_id
            and train.arrival_station_id == arrival_id
        ]
        logger.debug(f"Sorting {len(matches)} matching train(s) out of {len(trains)}")
        return TrainSorter.sort_by_criterion(matches, criterion)[:MAX_RESULTS]

    def _load_trains(self) -> list[Train]:
        """Load raw records and build trains; any bad record aborts the search."""
        try:
            records = self._train_repository.load_records()
        except TrainSearchError:
            raise
        except Exception as e:
            logger.warning(f"Failed to load train data: {e}")
            raise DataLoadError(f"error loading train data: {e}") from e

        trains = [Train.from_record(record, index=i) for i, record in enumerate(records)]
        logger.debug(f"Loaded {len(trains)} train(s)")
        return trains


def parse_station_id(raw: str, role: StationRole) -> int:
    """Parse a station identifier from query input.

    Raises:
        EmptyDepartureStationError / EmptyArrivalStationError: If ``raw`` is empty.
        MalformedDepartureStationError / MalformedArrivalStationError: If ``raw``
            is not a positive decimal integer.
    """
    try:
        return natural_number.parse(raw)
    except InvalidNumberError as e:
        if raw == "":
            raise EMPTY_STATION_ERRORS[role](f"empty {role} station") from e
        raise MALFORMED_STATION_ERRORS[role](
            f"bad {role} station input {raw!r}", value=e.value
        ) from e


def select_trains(
    trains: Iterable[Train], departure_id: int, arrival_id: int, limit: int = MAX_RESULTS
) -> list[Train]:
    """Collect trains serving the station pair, in input order, stopping at ``limit``."""
    selected: list[Train] = []
    for train in trains:
        if train.departure_station_id == departure_id and train.arrival_station_id == arrival_id:
            selected.append(train)
            if len(selected) == limit:
                break
    return selected
