"""Domain layer - core business logic and models."""

from train_search.domain.models import SearchQuery, SortCriterion, Train, TrainRecord
from train_search.domain.ports import TrainRepository

__all__ = [
    "SearchQuery",
    "SortCriterion",
    "Train",
    "TrainRecord",
    "TrainRepository",
]
