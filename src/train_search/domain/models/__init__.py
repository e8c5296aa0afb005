"""Domain models for train search."""

from train_search.domain.models.search_query import SearchQuery
from train_search.domain.models.sort_criterion import SortCriterion
from train_search.domain.models.train import Train
from train_search.domain.models.train_record import TrainRecord

__all__ = [
    "SearchQuery",
    "SortCriterion",
    "Train",
    "TrainRecord",
]
