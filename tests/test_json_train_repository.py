"""Tests for the JSON file train repository."""

import json
from pathlib import Path

import pytest

from tests.test_services import make_train_record
from train_search.adapters.json_data import JsonTrainRepository
from train_search.domain.errors import DataLoadError


def test_loads_records_in_file_order(tmp_path: Path) -> None:
    """Given a JSON array of records, when loading, then they are returned in file order."""
    records = [make_train_record(2), make_train_record(1)]
    path = tmp_path / "data.json"
    path.write_text(json.dumps(records), encoding="utf-8")

    loaded = JsonTrainRepository(path).load_records()

    assert loaded == records


def test_accepts_string_path(tmp_path: Path) -> None:
    """Given the path as a string, when loading, then the file is read."""
    path = tmp_path / "data.json"
    path.write_text("[]", encoding="utf-8")

    assert JsonTrainRepository(str(path)).load_records() == []


def test_records_are_not_validated_on_load(tmp_path: Path) -> None:
    """Given a malformed record, when loading, then it is returned as-is for later validation."""
    path = tmp_path / "data.json"
    path.write_text('[{"trainId": "x"}]', encoding="utf-8")

    assert JsonTrainRepository(path).load_records() == [{"trainId": "x"}]


def test_missing_file_raises_data_load_error(tmp_path: Path) -> None:
    """Given a missing data file, when loading, then DataLoadError wraps the OSError."""
    path = tmp_path / "missing.json"

    with pytest.raises(DataLoadError, match="error opening data file") as exc_info:
        JsonTrainRepository(path).load_records()

    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_invalid_json_raises_data_load_error(tmp_path: Path) -> None:
    """Given a file with broken JSON, when loading, then DataLoadError wraps the decode error."""
    path = tmp_path / "data.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(DataLoadError, match="error decoding json") as exc_info:
        JsonTrainRepository(path).load_records()

    assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)


def test_non_array_top_level_raises_data_load_error(tmp_path: Path) -> None:
    """Given a JSON object instead of an array, when loading, then DataLoadError is raised."""
    path = tmp_path / "data.json"
    path.write_text('{"trains": []}', encoding="utf-8")

    with pytest.raises(DataLoadError, match="must contain a JSON array"):
        JsonTrainRepository(path).load_records()
