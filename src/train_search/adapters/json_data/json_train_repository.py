"""JSON file train repository adapter."""

import json
import logging
from pathlib import Path
from typing import Any

from train_search.domain.errors import DataLoadError
from train_search.domain.ports.train_repository import TrainRepository

logger = logging.getLogger(__name__)


class JsonTrainRepository(TrainRepository):
    """Reads raw train records from a JSON file holding an array of objects."""

    def __init__(self, path: str | Path) -> None:
        """Initialize with the path of the data file."""
        self._path = Path(path)

    def load_records(self) -> list[dict[str, Any]]:
        """Load every record from the data file.

        Records are returned as decoded; their fields are validated later when
        trains are built.

        Raises:
            DataLoadError: If the file cannot be read, is not valid JSON, or its
                top level is not an array.
        """
        try:
            with open(self._path, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise DataLoadError(f"error opening data file {self._path}: {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DataLoadError(f"error decoding json from file {self._path}: {e}") from e

        if not isinstance(data, list):
            raise DataLoadError(
                f"data file {self._path} must contain a JSON array, got {type(data).__name__}"
            )

        logger.info(f"Read {len(data)} record(s) from {self._path}")
        return data
