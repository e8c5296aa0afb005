"""Ports (interfaces) for the ports-and-adapters architecture."""

from train_search.domain.ports.train_repository import TrainRepository

__all__ = ["TrainRepository"]
