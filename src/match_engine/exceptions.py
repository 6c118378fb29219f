"""Custom exceptions for the match engine.

The pure domain layer never raises; these cover configuration, record loading
and application wiring.
"""

from __future__ import annotations


class EngineError(Exception):
    """Base exception for all match engine errors."""

    pass


class DependencyMissingError(EngineError):
    """Raised when an entry point is called without a required dependency."""

    def __init__(self, dependency: str, *, reason: str = "") -> None:
        message = f"{dependency} is required."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)


class PositiveNumberEnvVarError(EngineError, ValueError):
    """Raised when an environment variable must be a positive number."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a positive number.")


class LogLevelEnvVarError(EngineError, ValueError):
    """Raised when an env var does not name a logging level."""

    def __init__(self, env_name: str, value: str) -> None:
        super().__init__(
            f"{env_name} must be one of DEBUG, INFO, WARNING, ERROR or CRITICAL, got {value!r}."
        )


class ConfigFileNotFoundError(EngineError):
    """Raised when a config file path does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Config file not found: {path}")


class ConfigFileParseError(EngineError):
    """Raised when a config file is not valid TOML."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Config file {path} is not valid TOML: {detail}")


class ConfigFileValidationError(EngineError):
    """Raised when a config file does not match the expected schema."""

    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"Config file {path} is invalid: {detail}")


class UserRecordsFileNotFoundError(EngineError):
    """Raised when the user-records export is missing."""

    def __init__(self, path: str) -> None:
        super().__init__(
            f"User records file not found: {path}\n"
            "Export the users collection to JSON or pass --users."
        )


class UserRecordValidationError(EngineError):
    """Raised when a user record payload fails validation."""

    def __init__(self, user_id: str, detail: str) -> None:
        self.user_id = user_id
        super().__init__(f"User record {user_id or '<unknown>'} is invalid: {detail}")


class UserNotFoundError(EngineError):
    """Raised when a requested user id is not among the loaded records."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}")
