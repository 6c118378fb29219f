"""Loading user records from a JSON export of the users collection."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ..config import EngineConfig
from ..domain.profiles import ProfileRecord
from ..exceptions import DependencyMissingError, UserNotFoundError, UserRecordsFileNotFoundError
from ..io_validation import parse_user_records
from ..observability import get_logger
from ..protocols import FileSystem


def load_user_records(
    path: str | Path,
    *,
    config: EngineConfig,
    fs: FileSystem | None = None,
) -> list[ProfileRecord]:
    """Read and validate every record in a `{"users": [...]}` export.

    Raises:
        UserRecordsFileNotFoundError: If the export does not exist.
        UserRecordValidationError: If any record is malformed.
    """
    if fs is None:
        raise DependencyMissingError("FileSystem", reason="Inject it at the entry point.")
    logger = get_logger("match_engine.records", level=config.log_level)
    path = Path(path)
    if not fs.exists(path):
        raise UserRecordsFileNotFoundError(str(path))

    records = parse_user_records(
        fs.read_json(path), default_match_radius_km=config.default_match_radius_km
    )
    logger.info("Loaded %s user records from %s", len(records), path)
    return records


def find_user(records: Iterable[ProfileRecord], user_id: str) -> ProfileRecord:
    for record in records:
        if record.user_id == user_id:
            return record
    raise UserNotFoundError(user_id)
