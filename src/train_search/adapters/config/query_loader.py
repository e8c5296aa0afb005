"""Search query loader."""

import json
import logging
import tomllib
from pathlib import Path
from typing import Any

from train_search.adapters.config.app_config import AppConfig
from train_search.domain.models import SearchQuery

logger = logging.getLogger(__name__)

# Keys of the JSON query file, per query field
JSON_KEYS = {
    "departure_station": "departureStationId",
    "arrival_station": "arrivalStationId",
    "criterion": "criteria",
}

# Keys of the [query] table in a TOML query file, per query field
TOML_KEYS = {
    "departure_station": "departure_station_id",
    "arrival_station": "arrival_station_id",
    "criterion": "criterion",
}


class QueryLoader:
    """Builds a SearchQuery from the query file, app config and explicit overrides."""

    @staticmethod
    def load(
        config: AppConfig,
        departure_station: str | None = None,
        arrival_station: str | None = None,
        criterion: str | None = None,
    ) -> SearchQuery:
        """Load the search query.

        Precedence, highest first: explicit arguments, values set on ``config``
        (environment), then the query file. Missing values become ``""`` and are
        reported by the search pipeline.

        Raises:
            FileNotFoundError: If the query file is needed but does not exist.
            ValueError: If the query file cannot be parsed or a value is not a string.
        """
        values: dict[str, str | None] = {
            "departure_station": _first_set(departure_station, config.departure_station_id),
            "arrival_station": _first_set(arrival_station, config.arrival_station_id),
            "criterion": _first_set(criterion, config.criterion),
        }

        if any(value is None for value in values.values()):
            file_values = QueryLoader.load_file(Path(config.config_file))
            for field, value in values.items():
                if value is None:
                    values[field] = file_values.get(field, "")

        logger.debug(f"Loaded query: {values}")
        return SearchQuery(
            departure_station=values["departure_station"] or "",
            arrival_station=values["arrival_station"] or "",
            criterion=values["criterion"] or "",
        )

    @staticmethod
    def load_file(path: Path) -> dict[str, str]:
        """Read query values from a .json or .toml file, keyed by SearchQuery field."""
        if not path.exists():
            raise FileNotFoundError(f"Query file not found: {path}")

        if path.suffix.lower() == ".toml":
            with open(path, "rb") as f:
                try:
                    data = tomllib.load(f)
                except tomllib.TOMLDecodeError as e:
                    raise ValueError(f"error decoding TOML from {path}: {e}") from e
            section = data.get("query", {})
            keys = TOML_KEYS
        else:
            with open(path, encoding="utf-8") as f:
                try:
                    section = json.load(f)
                except json.JSONDecodeError as e:
                    raise ValueError(f"error decoding JSON from {path}: {e}") from e
            keys = JSON_KEYS

        if not isinstance(section, dict):
            raise ValueError(f"Query in {path} must be an object")

        return _extract(section, keys, path)


def _first_set(*candidates: str | None) -> str | None:
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return None


def _extract(section: dict[str, Any], keys: dict[str, str], path: Path) -> dict[str, str]:
    result: dict[str, str] = {}
    for field, key in keys.items():
        if key not in section:
            continue
        value = section[key]
        if not isinstance(value, str):
            raise ValueError(
                f"Query value '{key}' in {path} must be a string, got {type(value).__name__}"
            )
        result[field] = value
    return result
