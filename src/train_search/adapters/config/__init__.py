"""Configuration adapters."""

from train_search.adapters.config.app_config import AppConfig
from train_search.adapters.config.query_loader import QueryLoader

__all__ = ["AppConfig", "QueryLoader"]
