"""Pydantic-based validation of user records exported from the document store.

Everything that reaches the domain layer passes through here first: raw
documents become `ProfileRecord` values and the various timestamp shapes the
store produces become plain epoch seconds.

Usage example:
    from match_engine.io_validation import parse_user_record

    record = parse_user_record(
        {
            "id": "u1",
            "name": "Sam",
            "relationshipIntent": "casual",
            "lastActiveAt": {"_seconds": 1767225600, "_nanoseconds": 0},
        }
    )
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import TypedDict

from pydantic import TypeAdapter, ValidationError

from .domain.geo import GeoPoint
from .domain.intent import parse_relationship_intent
from .domain.profiles import DEFAULT_MATCH_RADIUS_KM, ProfileRecord
from .exceptions import UserRecordValidationError

# Epoch values above this are milliseconds (1e11 seconds is the year 5138).
_MILLISECONDS_THRESHOLD = 1e11


class IncomingDataError(ValueError):
    """Raised when inbound data fails validation."""


class LocationInput(TypedDict, total=False):
    latitude: float | None
    longitude: float | None


class UserRecordInput(TypedDict, total=False):
    id: str
    name: str | None
    fullName: str | None
    age: int | None
    gender: str | None
    photos: list[object] | None
    bio: str | None
    interests: list[object] | None
    relationshipIntent: object
    interestedIn: list[object] | None
    location: LocationInput | None
    matchRadiusKm: float | None
    lastActiveAt: object
    occupation: str | None
    height: object


class UserRecordsInput(TypedDict, total=False):
    users: list[dict[str, object]]


def validate_as[SchemaT](schema: type[SchemaT], payload: object) -> SchemaT:
    try:
        return TypeAdapter(schema).validate_python(payload)
    except ValidationError as exc:
        message = f"Invalid payload for {schema}: {_format_validation_error(exc)}"
        raise IncomingDataError(message) from exc


def validate_json_as[SchemaT](schema: type[SchemaT], payload: str | bytes | bytearray) -> SchemaT:
    try:
        return TypeAdapter(schema).validate_json(payload)
    except ValidationError as exc:
        message = f"Invalid JSON payload for {schema}."
        raise IncomingDataError(message) from exc


def _format_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ("<root>",)))
    message = str(first.get("msg", "invalid value"))
    return f"{location}: {message}"


def _is_number(value: object) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def normalize_instant(value: object) -> float | None:
    """Convert a stored timestamp into epoch seconds (UTC).

    Accepts None/empty, `datetime` (naive values are taken as UTC), epoch
    seconds or milliseconds, ISO-8601 strings and timestamp mappings with
    `seconds`/`_seconds` and optional `nanoseconds`/`_nanoseconds`.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.timestamp()
    if _is_number(value):
        number = float(value)  # type: ignore[arg-type]
        if abs(number) > _MILLISECONDS_THRESHOLD:
            return number / 1000.0
        return number
    if isinstance(value, str):
        try:
            return normalize_instant(datetime.fromisoformat(value.strip()))
        except ValueError as exc:
            raise IncomingDataError(f"Unrecognised timestamp string: {value!r}") from exc
    if isinstance(value, Mapping):
        seconds = value.get("seconds", value.get("_seconds"))
        nanoseconds = value.get("nanoseconds", value.get("_nanoseconds", 0))
        if _is_number(seconds) and _is_number(nanoseconds):
            return float(seconds) + float(nanoseconds) / 1e9  # type: ignore[arg-type]
    raise IncomingDataError(f"Unrecognised timestamp value: {value!r}")


def _as_str(value: object) -> str:
    return value.strip() if isinstance(value, str) else ""


def _as_optional_str(value: object) -> str | None:
    text = _as_str(value)
    return text or None


def _as_str_set(value: object) -> frozenset[str]:
    if value is None:
        return frozenset()
    items = validate_as(list[object], value)
    return frozenset(text for item in items if (text := str(item).strip()))


def _coerce_location(location: LocationInput | None) -> GeoPoint | None:
    if not location:
        return None
    latitude = location.get("latitude")
    longitude = location.get("longitude")
    if latitude is None or longitude is None:
        return None
    return GeoPoint(latitude=float(latitude), longitude=float(longitude))


def _coerce_height(value: object) -> float | None:
    # Heights are stored either as a bare number or as {"value": ..., "unit": "cm"}.
    if isinstance(value, Mapping):
        value = value.get("value")
    if _is_number(value) and value:
        return float(value)  # type: ignore[arg-type]
    return None


def _coerce_radius(value: float | None, default: float) -> float:
    if value is None or value <= 0:
        return default
    return float(value)


def parse_user_record(
    payload: Mapping[str, object],
    *,
    default_match_radius_km: float = DEFAULT_MATCH_RADIUS_KM,
) -> ProfileRecord:
    """Validate one raw user document into a `ProfileRecord`.

    Raises:
        UserRecordValidationError: If the payload does not match the record shape.
    """
    raw_id = payload.get("id") if isinstance(payload, Mapping) else None
    user_id = raw_id if isinstance(raw_id, str) else ""
    try:
        record = validate_as(UserRecordInput, payload)
        if not _as_str(record.get("id")):
            raise IncomingDataError("id: must be a non-empty string")
        photos = record.get("photos") or []
        return ProfileRecord(
            user_id=_as_str(record.get("id")),
            name=_as_str(record.get("name")) or _as_str(record.get("fullName")),
            age=record.get("age") or None,
            gender=_as_str(record.get("gender")),
            photo_count=len(photos),
            bio=record.get("bio") or "",
            interests=_as_str_set(record.get("interests")),
            relationship_intent=parse_relationship_intent(record.get("relationshipIntent")),
            interested_in=_as_str_set(record.get("interestedIn")),
            location=_coerce_location(record.get("location")),
            match_radius_km=_coerce_radius(record.get("matchRadiusKm"), default_match_radius_km),
            last_active_at=normalize_instant(record.get("lastActiveAt")),
            occupation=_as_optional_str(record.get("occupation")),
            height_cm=_coerce_height(record.get("height")),
        )
    except IncomingDataError as exc:
        raise UserRecordValidationError(user_id, str(exc)) from exc


def parse_user_records(
    payload: object,
    *,
    default_match_radius_km: float = DEFAULT_MATCH_RADIUS_KM,
) -> list[ProfileRecord]:
    """Validate a `{"users": [...]}` export into records, preserving order."""
    try:
        export = validate_as(UserRecordsInput, payload)
    except IncomingDataError as exc:
        raise UserRecordValidationError("", str(exc)) from exc
    return [
        parse_user_record(raw, default_match_radius_km=default_match_radius_km)
        for raw in export.get("users", [])
    ]
