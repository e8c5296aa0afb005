"""Train repository port."""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol


class TrainRepository(Protocol):
    """Port for retrieving the raw train dataset."""

    def load_records(self) -> Sequence[Mapping[str, Any]]:
        """Return every raw train record in dataset order."""
        ...
