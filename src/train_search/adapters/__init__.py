"""Adapters layer - external system integrations."""

from train_search.adapters.config import AppConfig, QueryLoader
from train_search.adapters.formatters import TrainFormatter
from train_search.adapters.json_data import JsonTrainRepository

__all__ = [
    "AppConfig",
    "JsonTrainRepository",
    "QueryLoader",
    "TrainFormatter",
]
