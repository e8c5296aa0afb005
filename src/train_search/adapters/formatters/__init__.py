"""Output formatters."""

from train_search.adapters.formatters.train_formatter import TrainFormatter

__all__ = ["TrainFormatter"]
