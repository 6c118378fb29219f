"""Protocol definitions for dependency injection.

The application layer and CLI depend on these interfaces so tests can swap in
in-memory implementations.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    import pandas as pd


@runtime_checkable
class FileSystem(Protocol):
    """Abstract filesystem for reading user exports and writing rankings."""

    def exists(self, path: Path) -> bool:
        """Return True if the path exists."""
        ...

    def read_text(self, path: Path) -> str:
        """Read a UTF-8 text file."""
        ...

    def read_json(self, path: Path) -> dict[str, object]:
        """Read a JSON file whose top level is an object."""
        ...

    def write_csv(self, df: pd.DataFrame, path: Path) -> None:
        """Write a DataFrame to CSV, creating parent directories."""
        ...
