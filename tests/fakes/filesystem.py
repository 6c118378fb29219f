"""Filesystem fakes for tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import override

import pandas as pd

from match_engine.io_validation import IncomingDataError, validate_as
from match_engine.protocols import FileSystem
from tests.support.errors import FakeFileNotFoundError, FakeFileTypeError


def _empty_files() -> dict[str, object]:
    return {}


@dataclass
class InMemoryFileSystem(FileSystem):
    """In-memory filesystem for testing."""

    _files: dict[str, object] = field(default_factory=_empty_files)

    @override
    def exists(self, path: Path) -> bool:
        return str(path) in self._files

    @override
    def read_text(self, path: Path) -> str:
        data = self._get(path)
        if isinstance(data, str):
            return data
        raise FakeFileTypeError("str", str(path))

    @override
    def read_json(self, path: Path) -> dict[str, object]:
        data = self._get(path)
        try:
            return validate_as(dict[str, object], data)
        except IncomingDataError as exc:
            raise FakeFileTypeError("dict", str(path)) from exc

    @override
    def write_csv(self, df: pd.DataFrame, path: Path) -> None:
        self._files[str(path)] = df.copy()

    def _get(self, path: Path) -> object:
        key = str(path)
        if key not in self._files:
            raise FakeFileNotFoundError(key)
        return self._files[key]
