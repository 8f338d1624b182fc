from collections.abc import Sequence

from auction_values.domain.draft import DraftPick, InflationResult, PendingBid
from auction_values.domain.errors import ConfigError
from auction_values.domain.league_settings import LeagueSettings
from auction_values.domain.projection import PlayerProjection
from auction_values.domain.result import Err, Ok, Result
from auction_values.domain.scoring import PlayerType, ScoringFormat
from auction_values.domain.valuation import PlayerValue, SplitMethod, ValueCalculationSettings
from auction_values.engine import calculate_inflation, calculate_player_values
from auction_values.engine.categories import is_valid_weight


def check_league(league: LeagueSettings) -> ConfigError | None:
    if league.teams <= 0:
        return ConfigError(message=f"teams must be > 0, got {league.teams}", field="teams")
    if league.budget <= 0:
        return ConfigError(message=f"budget must be > 0, got {league.budget}", field="budget")
    for position, count in league.positions.items():
        if count < 0:
            return ConfigError(message=f"{position} slots must be >= 0, got {count}", field="positions")
    return None


def check_scoring(scoring: ScoringFormat) -> ConfigError | None:
    for player_type in PlayerType:
        for category, weight in scoring.weights(player_type):
            if not is_valid_weight(weight):
                return ConfigError(
                    message=f"{player_type} category '{category}' has non-numeric weight {weight!r}",
                    field="scoring",
                )
    return None


def check_settings(settings: ValueCalculationSettings) -> ConfigError | None:
    if settings.split_method is SplitMethod.MANUAL and not 0 <= settings.hitter_budget_percent <= 100:
        return ConfigError(
            message=f"hitter_budget_percent must be within [0, 100], got {settings.hitter_budget_percent}",
            field="hitter_budget_percent",
        )
    return None


def value_players(
    projections: Sequence[PlayerProjection],
    league: LeagueSettings,
    scoring: ScoringFormat,
    settings: ValueCalculationSettings,
) -> Result[list[PlayerValue], ConfigError]:
    """Validate the inputs, then run the valuation pipeline."""
    for error in (check_league(league), check_scoring(scoring), check_settings(settings)):
        if error is not None:
            return Err(error)
    return Ok(calculate_player_values(projections, league, scoring, settings))


def live_values(
    player_values: Sequence[PlayerValue],
    picks: Sequence[DraftPick],
    league: LeagueSettings,
    pending_bids: Sequence[PendingBid] = (),
) -> Result[InflationResult, ConfigError]:
    known = {v.id for v in player_values}
    for pick in picks:
        if pick.player_id not in known:
            return Err(ConfigError(message=f"pick #{pick.pick_number} names unknown player '{pick.player_id}'"))
        if pick.price < 0:
            return Err(ConfigError(message=f"pick #{pick.pick_number} has negative price {pick.price}"))
    return Ok(calculate_inflation(player_values, picks, league, pending_bids))
