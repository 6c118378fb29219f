"""Local filesystem implementation.

Usage example:
    from pathlib import Path

    import pandas as pd

    from match_engine.infrastructure.filesystem import LocalFileSystem

    fs = LocalFileSystem()
    users = fs.read_json(Path("data/users.json"))
    fs.write_csv(pd.DataFrame({"user_id": ["u1"], "score": [61]}), Path("data/feed.csv"))
"""

from __future__ import annotations

from pathlib import Path
from typing import override

import pandas as pd

from ..io_validation import IncomingDataError, validate_json_as
from ..protocols import FileSystem


class JsonObjectExpectedError(ValueError):
    """Raised when a JSON file does not hold an object at the top level."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"JSON file must contain an object: {path}")


class LocalFileSystem(FileSystem):
    """Local filesystem implementation."""

    @override
    def exists(self, path: Path) -> bool:
        return path.exists()

    @override
    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    @override
    def read_json(self, path: Path) -> dict[str, object]:
        payload = self.read_text(path)
        try:
            return validate_json_as(dict[str, object], payload)
        except IncomingDataError as exc:
            raise JsonObjectExpectedError(path) from exc

    @override
    def write_csv(self, df: pd.DataFrame, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(path, index=False)
