"""Tests for filesystem infrastructure components."""

import json
from pathlib import Path

import pandas as pd
import pytest

from match_engine.infrastructure import LocalFileSystem
from match_engine.infrastructure.filesystem import JsonObjectExpectedError


class TestLocalFileSystemJson:
    """Tests for LocalFileSystem read_json."""

    def test_read_json_returns_object(self, tmp_path: Path) -> None:
        path = tmp_path / "users.json"
        path.write_text(json.dumps({"users": [{"id": "u1"}]}), encoding="utf-8")

        payload = LocalFileSystem().read_json(path)

        assert payload == {"users": [{"id": "u1"}]}

    def test_read_json_rejects_top_level_array(self, tmp_path: Path) -> None:
        path = tmp_path / "users.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(JsonObjectExpectedError):
            LocalFileSystem().read_json(path)

    def test_exists_reflects_disk(self, tmp_path: Path) -> None:
        fs = LocalFileSystem()
        path = tmp_path / "missing.json"

        assert fs.exists(path) is False
        path.write_text("{}", encoding="utf-8")
        assert fs.exists(path) is True


class TestLocalFileSystemCsv:
    """Tests for LocalFileSystem write_csv."""

    def test_write_csv_creates_parent_directories(self, tmp_path: Path) -> None:
        path = tmp_path / "processed" / "feed.csv"
        df = pd.DataFrame({"user_id": ["u1", "u2"], "score": [61, 40]})

        LocalFileSystem().write_csv(df, path)

        out = pd.read_csv(path)
        assert out["user_id"].tolist() == ["u1", "u2"]
        assert out["score"].tolist() == [61, 40]
