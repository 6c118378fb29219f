"""Tests for loading user records from an export."""

from pathlib import Path

import pytest

from match_engine.application.records import find_user, load_user_records
from match_engine.config import EngineConfig
from match_engine.exceptions import (
    DependencyMissingError,
    UserNotFoundError,
    UserRecordsFileNotFoundError,
    UserRecordValidationError,
)
from tests.fakes import InMemoryFileSystem
from tests.support.records import make_record, make_user_document

USERS_PATH = Path("data/users.json")


def _users_fs(*documents: dict[str, object]) -> InMemoryFileSystem:
    return InMemoryFileSystem({str(USERS_PATH): {"users": list(documents)}})


def test_load_user_records_preserves_order() -> None:
    fs = _users_fs(make_user_document("b"), make_user_document("a"))

    records = load_user_records(USERS_PATH, config=EngineConfig(), fs=fs)

    assert [record.user_id for record in records] == ["b", "a"]


def test_load_user_records_applies_default_radius() -> None:
    fs = _users_fs(make_user_document("a", matchRadiusKm=None))

    records = load_user_records(
        USERS_PATH, config=EngineConfig(default_match_radius_km=40.0), fs=fs
    )

    assert records[0].match_radius_km == 40.0


def test_load_user_records_missing_file(in_memory_fs: InMemoryFileSystem) -> None:
    with pytest.raises(UserRecordsFileNotFoundError):
        load_user_records(USERS_PATH, config=EngineConfig(), fs=in_memory_fs)


def test_load_user_records_invalid_record() -> None:
    fs = _users_fs(make_user_document("a", age="thirty"))

    with pytest.raises(UserRecordValidationError, match="User record a is invalid"):
        load_user_records(USERS_PATH, config=EngineConfig(), fs=fs)


def test_load_user_records_requires_filesystem() -> None:
    with pytest.raises(DependencyMissingError):
        load_user_records(USERS_PATH, config=EngineConfig(), fs=None)


def test_find_user() -> None:
    records = [make_record("a"), make_record("b")]

    assert find_user(records, "b").user_id == "b"
    with pytest.raises(UserNotFoundError, match="User not found: c"):
        find_user(records, "c")
