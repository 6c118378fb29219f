"""Centralised, injectable configuration for the match engine."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Self

from dotenv import load_dotenv

from .config_file import EngineConfigFile
from .domain.profiles import DEFAULT_MATCH_RADIUS_KM
from .exceptions import LogLevelEnvVarError, PositiveNumberEnvVarError
from .observability.logging import DEFAULT_LOG_LEVEL, LOG_LEVELS


@dataclass(frozen=True)
class EngineConfig:
    """Immutable configuration for feed and liker ranking.

    Load from environment with `EngineConfig.from_env()` or construct directly for testing.
    """

    # Fallback radius for users who never set one
    default_match_radius_km: float = DEFAULT_MATCH_RADIUS_KM
    feed_limit: int = 50
    liker_batch_size: int = 20  # likers visible at once
    users_path: str = "data/users.json"
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> Self:
        """Load configuration from environment variables.

        Args:
            dotenv_path: Optional path to .env file. If None, uses default .env discovery.
        """
        load_dotenv(dotenv_path)

        return cls(
            default_match_radius_km=_parse_positive_float(
                os.getenv("MATCH_DEFAULT_RADIUS_KM", ""),
                env_name="MATCH_DEFAULT_RADIUS_KM",
                default=DEFAULT_MATCH_RADIUS_KM,
            ),
            feed_limit=_parse_positive_int(
                os.getenv("MATCH_FEED_LIMIT", ""), env_name="MATCH_FEED_LIMIT", default=50
            ),
            liker_batch_size=_parse_positive_int(
                os.getenv("MATCH_LIKER_BATCH_SIZE", ""),
                env_name="MATCH_LIKER_BATCH_SIZE",
                default=20,
            ),
            users_path=os.getenv("MATCH_USERS_PATH", "").strip() or "data/users.json",
            log_level=_parse_log_level(
                os.getenv("MATCH_LOG_LEVEL", ""), env_name="MATCH_LOG_LEVEL"
            ),
        )

    def with_overrides(
        self,
        *,
        default_match_radius_km: float | None = None,
        feed_limit: int | None = None,
        liker_batch_size: int | None = None,
        users_path: str | None = None,
    ) -> Self:
        """Return a new config with specified overrides (for CLI options)."""
        return replace(
            self,
            default_match_radius_km=self.default_match_radius_km
            if default_match_radius_km is None
            else default_match_radius_km,
            feed_limit=self.feed_limit if feed_limit is None else feed_limit,
            liker_batch_size=self.liker_batch_size
            if liker_batch_size is None
            else liker_batch_size,
            users_path=self.users_path if users_path is None else users_path.strip(),
        )

    def with_file_overrides(self, file_config: EngineConfigFile) -> Self:
        """Return a new config with config-file values overriding env/default values."""
        return replace(
            self,
            default_match_radius_km=self.default_match_radius_km
            if file_config.default_match_radius_km is None
            else file_config.default_match_radius_km,
            feed_limit=self.feed_limit
            if file_config.feed_limit is None
            else file_config.feed_limit,
            liker_batch_size=self.liker_batch_size
            if file_config.liker_batch_size is None
            else file_config.liker_batch_size,
            users_path=self.users_path
            if file_config.users_path is None
            else file_config.users_path,
            log_level=self.log_level if file_config.log_level is None else file_config.log_level,
        )


def _parse_positive_int(value: str, *, env_name: str, default: int) -> int:
    text = value.strip()
    if not text:
        return default
    try:
        parsed = int(text)
    except ValueError as exc:
        raise PositiveNumberEnvVarError(env_name) from exc
    if parsed < 1:
        raise PositiveNumberEnvVarError(env_name)
    return parsed


def _parse_positive_float(value: str, *, env_name: str, default: float) -> float:
    text = value.strip()
    if not text:
        return default
    try:
        parsed = float(text)
    except ValueError as exc:
        raise PositiveNumberEnvVarError(env_name) from exc
    if not parsed > 0:
        raise PositiveNumberEnvVarError(env_name)
    return parsed


def _parse_log_level(value: str, *, env_name: str) -> str:
    level = value.strip().upper()
    if not level:
        return DEFAULT_LOG_LEVEL
    if level not in LOG_LEVELS:
        raise LogLevelEnvVarError(env_name, value.strip())
    return level
