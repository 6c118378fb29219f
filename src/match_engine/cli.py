"""CLI for the match engine.

Commands:
- rank: Build a viewer's ranked feed from a users export and write it to CSV
- likers: Rank and filter the users who liked a viewer
- completeness: Show a user's profile completeness and missing sections
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Protocol

import typer
from rich import print as rprint

from .application.feed import build_feed, feed_to_frame
from .application.likers import rank_likers
from .application.records import find_user, load_user_records
from .config import EngineConfig
from .config_file import load_engine_config_file
from .domain.completeness import calculate_profile_completeness, get_missing_fields
from .domain.intent import RelationshipIntent, parse_relationship_intent
from .domain.liker_filters import LikerFilters, NumericRange
from .protocols import FileSystem


class DependenciesBuilder(Protocol):
    """Protocol for constructing CLI dependencies."""

    def __call__(self, *, config: EngineConfig) -> CliDependencies:
        """Build dependencies for CLI commands."""
        ...


@dataclass(frozen=True)
class CliDependencies:
    """Concrete dependencies required by the CLI."""

    fs: FileSystem


@dataclass(frozen=True)
class CliContext:
    """Runtime CLI context for a single command invocation."""

    config: EngineConfig
    deps_builder: DependenciesBuilder

    def build_dependencies(self) -> CliDependencies:
        return self.deps_builder(config=self.config)


class CliContextNotInitialisedError(typer.BadParameter):
    """Raised when CLI context is missing."""

    def __init__(self) -> None:
        super().__init__("CLI context is not initialised. Use the match-engine entry point.")


class UnknownIntentError(typer.BadParameter):
    """Raised when an --intent value is outside the intent vocabulary."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Unknown relationship intent: {value}")


DEFAULT_FEED_OUT = Path("data/processed/feed.csv")


def _get_context(ctx: typer.Context) -> CliContext:
    if not isinstance(ctx.obj, CliContext):
        raise CliContextNotInitialisedError()
    return ctx.obj


def _parse_intents(values: list[str] | None) -> frozenset[RelationshipIntent] | None:
    if not values:
        return None
    intents: set[RelationshipIntent] = set()
    for value in values:
        intent = parse_relationship_intent(value)
        if intent is None:
            raise UnknownIntentError(value)
        intents.add(intent)
    return frozenset(intents)


def _format_distance(distance_km: float | None) -> str:
    return "unknown" if distance_km is None else f"{distance_km:.1f} km"


def create_app(deps_builder: DependenciesBuilder) -> typer.Typer:
    """Create a Typer app wired with the provided dependencies builder."""
    app = typer.Typer(
        add_completion=False,
        help="Match compatibility engine: eligibility → scoring → ranking",
    )

    @app.callback()
    def main(
        ctx: typer.Context,
        config_path: Annotated[
            Path | None,
            typer.Option(
                "--config",
                "-c",
                help="TOML config file (overrides environment values)",
            ),
        ] = None,
    ) -> None:
        """Initialise CLI context."""
        config = EngineConfig.from_env()
        if config_path is not None:
            fs = deps_builder(config=config).fs
            config = config.with_file_overrides(
                load_engine_config_file(path=config_path, fs=fs)
            )
        ctx.obj = CliContext(config=config, deps_builder=deps_builder)

    @app.command()
    def rank(
        ctx: typer.Context,
        viewer_id: Annotated[str, typer.Option("--viewer", "-v", help="Viewing user id")],
        users_path: Annotated[
            Path | None,
            typer.Option("--users", "-u", help="Users export JSON (default: MATCH_USERS_PATH)"),
        ] = None,
        out_path: Annotated[
            Path,
            typer.Option("--output", "-o", help="Output path for the ranked feed CSV"),
        ] = DEFAULT_FEED_OUT,
        limit: Annotated[
            int | None,
            typer.Option("--limit", "-n", help="Maximum feed size (default: MATCH_FEED_LIMIT)"),
        ] = None,
        exclude: Annotated[
            list[str] | None,
            typer.Option(
                "--exclude",
                "-x",
                help="User id to leave out, e.g. already swiped (repeatable)",
            ),
        ] = None,
        seed: Annotated[
            int | None,
            typer.Option("--seed", help="Seed for the unranked shuffle"),
        ] = None,
    ) -> None:
        """Rank candidates for a viewer and write the feed CSV."""
        state = _get_context(ctx)
        config = state.config.with_overrides(
            feed_limit=limit,
            users_path=None if users_path is None else str(users_path),
        )
        deps = state.build_dependencies()
        records = load_user_records(config.users_path, config=config, fs=deps.fs)
        viewer = find_user(records, viewer_id)
        entries = build_feed(
            viewer,
            records,
            excluded_ids=exclude or (),
            limit=config.feed_limit,
            rng=random.Random(seed),
            log_level=config.log_level,
        )
        deps.fs.write_csv(feed_to_frame(entries), out_path)

        rprint(f"[green]✓ Feed ranked:[/green] {out_path}")
        rprint(f"  {len(entries):,} candidates for {viewer.user_id}")
        for entry in entries[:5]:
            rprint(f"  {entry.score:>3}  {entry.user_id}  ({_format_distance(entry.distance_km)})")

    @app.command()
    def likers(
        ctx: typer.Context,
        viewer_id: Annotated[str, typer.Option("--viewer", "-v", help="Viewing user id")],
        liker_ids: Annotated[
            list[str] | None,
            typer.Option("--liker", "-l", help="User id who liked the viewer (repeatable)"),
        ] = None,
        users_path: Annotated[
            Path | None,
            typer.Option("--users", "-u", help="Users export JSON (default: MATCH_USERS_PATH)"),
        ] = None,
        min_score: Annotated[
            int | None,
            typer.Option("--min-score", help="Lowest match score to show"),
        ] = None,
        max_distance: Annotated[
            float | None,
            typer.Option("--max-distance", help="Furthest distance to show, in km"),
        ] = None,
        intent: Annotated[
            list[str] | None,
            typer.Option("--intent", "-i", help="Relationship intent to keep (repeatable)"),
        ] = None,
        occupation: Annotated[
            list[str] | None,
            typer.Option("--occupation", help="Occupation to keep (repeatable)"),
        ] = None,
    ) -> None:
        """Rank the users who liked a viewer, with optional filters."""
        state = _get_context(ctx)
        config = state.config.with_overrides(
            users_path=None if users_path is None else str(users_path),
        )
        deps = state.build_dependencies()
        records = load_user_records(config.users_path, config=config, fs=deps.fs)
        viewer = find_user(records, viewer_id)
        if liker_ids:
            liker_records = [find_user(records, liker_id) for liker_id in liker_ids]
        else:
            liker_records = [record for record in records if record.user_id != viewer_id]

        filters = LikerFilters(
            relationship_intents=_parse_intents(intent),
            max_distance_km=max_distance,
            occupations=frozenset(occupation) if occupation else None,
            match_score_range=None if min_score is None else NumericRange(min_score, 100),
        )
        ranking = rank_likers(
            viewer,
            liker_records,
            filters=filters,
            limit=config.liker_batch_size,
            log_level=config.log_level,
        )

        rprint(
            f"[green]✓ {len(ranking.entries):,} of {ranking.total_count:,} likers[/green] "
            f"for {viewer.user_id}"
        )
        for entry in ranking.entries:
            rprint(
                f"  {entry.score:>3}  {entry.user_id}  trust {entry.completeness}%  "
                f"({_format_distance(entry.distance_km)})"
            )
        if ranking.available_occupations:
            rprint(f"  Occupations: {', '.join(ranking.available_occupations)}")

    @app.command()
    def completeness(
        ctx: typer.Context,
        user_id: Annotated[str, typer.Option("--user", help="User id")],
        users_path: Annotated[
            Path | None,
            typer.Option("--users", "-u", help="Users export JSON (default: MATCH_USERS_PATH)"),
        ] = None,
    ) -> None:
        """Show profile completeness and the sections still missing."""
        state = _get_context(ctx)
        config = state.config.with_overrides(
            users_path=None if users_path is None else str(users_path),
        )
        deps = state.build_dependencies()
        records = load_user_records(config.users_path, config=config, fs=deps.fs)
        profile = find_user(records, user_id)

        rprint(f"[green]✓ {profile.user_id}:[/green] {calculate_profile_completeness(profile)}%")
        missing = get_missing_fields(profile)
        if missing:
            rprint(f"  Missing: {', '.join(missing)}")
        else:
            rprint("  Profile complete")

    _ = (main, rank, likers, completeness)

    return app
