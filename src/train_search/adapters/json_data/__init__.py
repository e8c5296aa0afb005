"""JSON file adapters."""

from train_search.adapters.json_data.json_train_repository import JsonTrainRepository

__all__ = ["JsonTrainRepository"]
