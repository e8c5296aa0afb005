"""Application services (use cases) for train search."""

from train_search.application.services.train_search_service import (
    MAX_RESULTS,
    TrainSearchService,
)
from train_search.application.services.train_sorter import TrainSorter

__all__ = ["MAX_RESULTS", "TrainSearchService", "TrainSorter"]
