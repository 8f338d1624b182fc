from pathlib import Path
from typing import Annotated

import typer

from auction_values.cli._logging import configure_logging
from auction_values.cli._output import (
    print_draft_summary,
    print_error,
    print_leagues,
    print_player_values,
    print_position_needs,
    print_presets,
    print_recommended_split,
)
from auction_values.config_league import LeagueConfig, LeagueConfigError, list_leagues, load_league
from auction_values.domain.projection import PlayerProjection
from auction_values.domain.result import Err, Ok
from auction_values.engine import calculate_recommended_split
from auction_values.ingest.csv_source import ProjectionFileError, load_picks, load_projections
from auction_values.ingest.merge import merge_projections
from auction_values.scoring_presets import SCORING_PRESETS, presets_for_platform
from auction_values.services.draft_tracker import position_needs, summarize_draft
from auction_values.services.valuation_service import live_values, value_players

app = typer.Typer(name="auction-values", help="Auction dollar values for fantasy baseball drafts")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
) -> None:
    """Auction dollar values for fantasy baseball drafts."""
    configure_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


_ProjectionsArg = Annotated[Path, typer.Argument(help="Projection CSV (name, positions, stat columns)")]
_LeagueOpt = Annotated[str, typer.Option("--league", help="League name from auction.toml")]
_ConfigDirOpt = Annotated[Path, typer.Option("--config-dir", help="Directory containing auction.toml")]
_PitchersOpt = Annotated[
    Path | None, typer.Option("--pitchers", help="Separate pitcher projection CSV merged into PROJECTIONS")
]


def _load_league(league_name: str, config_dir: Path) -> LeagueConfig:
    try:
        return load_league(league_name, config_dir)
    except LeagueConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _load_projections(path: Path, pitchers_path: Path | None = None) -> list[PlayerProjection]:
    try:
        players = load_projections(path)
        if pitchers_path is None:
            return players
        return merge_projections(players, load_projections(pitchers_path)).projections
    except ProjectionFileError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def values(
    projections: _ProjectionsArg,
    league_name: _LeagueOpt = "default",
    config_dir: _ConfigDirOpt = Path("."),
    pitchers: _PitchersOpt = None,
    picks: Annotated[Path | None, typer.Option("--picks", help="Draft picks CSV for live values")] = None,
    top: Annotated[int | None, typer.Option("--top", help="Show top N players")] = None,
) -> None:
    """Compute auction values, optionally adjusted for draft inflation."""
    config = _load_league(league_name, config_dir)
    players = _load_projections(projections, pitchers)

    match value_players(players, config.league, config.scoring, config.valuation):
        case Ok(result):
            player_values = result
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)

    if picks is None:
        print_player_values(player_values, top=top)
        return

    try:
        draft_picks = load_picks(picks)
    except ProjectionFileError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    match live_values(player_values, draft_picks, config.league):
        case Ok(inflation):
            print_draft_summary(summarize_draft(draft_picks, config.league, inflation.inflation_rate))
            print_position_needs(position_needs(player_values, draft_picks, config.league))
            print_player_values(inflation.adjusted_values, live=True, top=top)
        case Err(e):
            print_error(e.message)
            raise typer.Exit(code=1)


@app.command()
def split(
    projections: _ProjectionsArg,
    league_name: _LeagueOpt = "default",
    config_dir: _ConfigDirOpt = Path("."),
    pitchers: _PitchersOpt = None,
) -> None:
    """Recommend a hitter/pitcher budget split for the projections."""
    config = _load_league(league_name, config_dir)
    players = _load_projections(projections, pitchers)
    print_recommended_split(calculate_recommended_split(players, config.league, config.scoring))


@app.command()
def presets(
    platform: Annotated[str | None, typer.Option("--platform", help="Filter by platform (ESPN, Yahoo, ...)")] = None,
) -> None:
    """List built-in scoring presets."""
    print_presets(presets_for_platform(platform) if platform else SCORING_PRESETS)


@app.command()
def leagues(config_dir: _ConfigDirOpt = Path(".")) -> None:
    """List leagues configured in auction.toml."""
    try:
        names = list_leagues(config_dir)
    except LeagueConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    print_leagues(names)
