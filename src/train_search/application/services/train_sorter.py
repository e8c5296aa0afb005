"""Stable ordering of trains by a named criterion."""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from train_search.domain.models import SortCriterion, Train

logger = logging.getLogger(__name__)

_SORT_KEYS: dict[SortCriterion, Callable[[Train], Any]] = {
    SortCriterion.PRICE: lambda train: train.price,
    SortCriterion.ARRIVAL_TIME: lambda train: train.arrival_time,
    SortCriterion.DEPARTURE_TIME: lambda train: train.departure_time,
}


class TrainSorter:
    """Sorts trains by price, arrival time or departure time."""

    @staticmethod
    def sort_by_criterion(trains: Iterable[Train], criterion: str) -> list[Train]:
        """Return the trains ordered by ``criterion``.

        The sort is stable: trains with equal keys keep their input order.
        A new list is returned and ``trains`` is left untouched.

        Raises:
            UnsupportedCriterionError: If ``criterion`` is not a recognized token.
                The criterion is checked even when there is nothing to sort.
        """
        sort_key = _SORT_KEYS[SortCriterion.parse(criterion)]
        ordered = sorted(trains, key=sort_key)
        logger.debug(f"Sorted {len(ordered)} train(s) by {criterion}")
        return ordered
