"""Full valuation run: ratings, slot allocation, replacement, VAR and dollars."""

import dataclasses
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from auction_values.domain.league_settings import LeagueSettings
from auction_values.domain.projection import PlayerProjection
from auction_values.domain.scoring import PlayerType, ScoringFormat
from auction_values.domain.valuation import (
    DEFAULT_HITTER_PERCENT,
    DraftablePlayer,
    PlayerValue,
    PositionReplacementLevel,
    RecommendedSplit,
    ValueCalculationSettings,
    ValueTier,
)
from auction_values.engine.allocation import allocate_positions
from auction_values.engine.categories import is_valid_weight
from auction_values.engine.dollars import (
    MIN_BID,
    assign_value_tiers,
    calculated_hitter_percent,
    convert_to_dollars,
    positive_var,
    tier_for_rank,
)
from auction_values.engine.normalize import rate_players
from auction_values.engine.positions import (
    is_hitter_eligible,
    is_pitcher_eligible,
    normalize_positions,
    sort_positions,
)
from auction_values.engine.replacement import resolve_replacement_levels
from auction_values.engine.var import compute_var

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Stages:
    positions: list[frozenset[str]]
    ratings: dict[PlayerType, dict[int, float]]
    draftable: list[DraftablePlayer]
    levels: dict[str, PositionReplacementLevel]


def player_id_for(projection: PlayerProjection, index: int) -> str:
    return projection.player_id or f"player-{index}"


def degenerate_reason(league: LeagueSettings, scoring: ScoringFormat) -> str | None:
    """Why a valuation run cannot produce meaningful dollars, or None."""
    if league.teams <= 0:
        return f"team count is {league.teams}"
    if league.budget <= 0:
        return f"auction budget is {league.budget}"
    for player_type in PlayerType:
        for category, weight in scoring.weights(player_type):
            if not is_valid_weight(weight):
                return f"{player_type} category {category!r} has non-numeric weight {weight!r}"
    return None


def _rate(
    projections: Sequence[PlayerProjection],
    indices: list[int],
    scoring: ScoringFormat,
    player_type: PlayerType,
    settings: ValueCalculationSettings,
    team_count: int,
) -> dict[int, float]:
    pool = [projections[i] for i in indices]
    rated = rate_players(pool, scoring, player_type, method=settings.method, team_count=team_count)
    return {indices[r.player_index]: r.rating for r in rated}


def _run_stages(
    projections: Sequence[PlayerProjection],
    league: LeagueSettings,
    scoring: ScoringFormat,
    settings: ValueCalculationSettings,
) -> _Stages:
    positions = [normalize_positions(p.positions) for p in projections]
    names = [p.name for p in projections]
    hitters = [i for i, pos in enumerate(positions) if is_hitter_eligible(pos)]
    pitchers = [i for i, pos in enumerate(positions) if is_pitcher_eligible(pos)]

    ratings = {
        PlayerType.HITTER: _rate(projections, hitters, scoring, PlayerType.HITTER, settings, league.teams),
        PlayerType.PITCHER: _rate(projections, pitchers, scoring, PlayerType.PITCHER, settings, league.teams),
    }
    allocation = allocate_positions(
        positions, names, league, ratings[PlayerType.HITTER], ratings[PlayerType.PITCHER]
    )
    levels = resolve_replacement_levels(
        allocation,
        positions,
        names,
        ratings[PlayerType.HITTER],
        ratings[PlayerType.PITCHER],
        settings.replacement_level_method,
    )
    draftable = compute_var(allocation.draftable, levels, apply_scarcity=settings.apply_position_scarcity)
    logger.info(
        "Rated %d hitters and %d pitchers; %d hitters and %d pitchers draftable",
        len(hitters),
        len(pitchers),
        allocation.hitter_count,
        allocation.pitcher_count,
    )
    return _Stages(positions=positions, ratings=ratings, draftable=draftable, levels=levels)


def _undrafted_type(index: int, ratings: dict[PlayerType, dict[int, float]]) -> tuple[PlayerType, float]:
    hitter = ratings[PlayerType.HITTER].get(index)
    pitcher = ratings[PlayerType.PITCHER].get(index)
    if pitcher is not None and (hitter is None or pitcher > hitter):
        return PlayerType.PITCHER, pitcher
    return PlayerType.HITTER, hitter if hitter is not None else 0.0


def _position_ranks(values: list[PlayerValue]) -> dict[str, dict[str, int]]:
    by_position: dict[str, list[PlayerValue]] = {}
    for v in values:
        for pos in v.positions:
            by_position.setdefault(pos, []).append(v)
    ranks: dict[str, dict[str, int]] = {v.id: {} for v in values}
    for pos, group in by_position.items():
        for rank, v in enumerate(sorted(group, key=lambda v: (-v.original_value, v.rank)), start=1):
            ranks[v.id][pos] = rank
    return ranks


def _finalize(unranked: list[tuple[tuple[int, float, int], PlayerValue]]) -> list[PlayerValue]:
    """Assign rank, tier and per-position rank, returning values in rank order."""
    ordered = [v for _, v in sorted(unranked, key=lambda item: item[0])]
    ranked = [
        dataclasses.replace(v, rank=rank, tier=tier_for_rank(rank))
        for rank, v in enumerate(ordered, start=1)
    ]
    position_ranks = _position_ranks(ranked)
    return [dataclasses.replace(v, position_rank=position_ranks[v.id]) for v in ranked]


def flat_values(projections: Sequence[PlayerProjection]) -> list[PlayerValue]:
    """All-$1 valuations used when league settings cannot support a real run."""
    unranked: list[tuple[tuple[int, float, int], PlayerValue]] = []
    for i, proj in enumerate(projections):
        positions = normalize_positions(proj.positions)
        player_type = PlayerType.HITTER if is_hitter_eligible(positions) else PlayerType.PITCHER
        value = PlayerValue(
            id=player_id_for(proj, i),
            name=proj.name,
            team=proj.team,
            positions=sort_positions(positions),
            original_value=MIN_BID,
            rank=0,
            tier=0,
            player_type=player_type,
        )
        unranked.append(((0, 0.0, i), value))
    return _finalize(unranked)


def calculate_player_values(
    projections: Sequence[PlayerProjection],
    league: LeagueSettings,
    scoring: ScoringFormat,
    settings: ValueCalculationSettings,
) -> list[PlayerValue]:
    """Value every projected player in auction dollars.

    Draftable players share the whole league budget (each worth at least $1);
    everyone else is worth $0. The result is ordered by rank: draftable players
    by dollar value, then the rest by rating, ties kept in input order.
    """
    if not projections:
        return []
    reason = degenerate_reason(league, scoring)
    if reason is not None:
        logger.warning("Cannot value players (%s); every player is worth $%d", reason, MIN_BID)
        return flat_values(projections)

    stages = _run_stages(projections, league, scoring, settings)
    dollars = convert_to_dollars(stages.draftable, league, settings)
    value_tiers: dict[int, ValueTier] = assign_value_tiers(stages.draftable) if settings.show_tiers else {}
    by_index = {d.index: d for d in stages.draftable}

    unranked: list[tuple[tuple[int, float, int], PlayerValue]] = []
    for i, proj in enumerate(projections):
        common = {
            "id": player_id_for(proj, i),
            "name": proj.name,
            "team": proj.team,
            "positions": sort_positions(stages.positions[i]),
            "rank": 0,
            "tier": 0,
        }
        drafted = by_index.get(i)
        if drafted is not None:
            value = dollars.values[i]
            pv = PlayerValue(
                **common,
                original_value=value,
                player_type=drafted.player_type,
                rating=drafted.rating,
                is_draftable=True,
                assigned_position=drafted.position,
                var=drafted.var,
                value_tier=value_tiers.get(i),
            )
            unranked.append(((0, -float(value), i), pv))
        else:
            player_type, rating = _undrafted_type(i, stages.ratings)
            pv = PlayerValue(**common, original_value=0, player_type=player_type, rating=rating)
            unranked.append(((1, -rating, i), pv))
    return _finalize(unranked)


def calculate_recommended_split(
    projections: Sequence[PlayerProjection],
    league: LeagueSettings,
    scoring: ScoringFormat,
) -> RecommendedSplit:
    """Suggest a hitter budget share from where the value above replacement sits."""
    default_split = f"{DEFAULT_HITTER_PERCENT}/{100 - DEFAULT_HITTER_PERCENT}"
    if not projections:
        return RecommendedSplit(DEFAULT_HITTER_PERCENT, f"No projections loaded; using the default {default_split}")
    reason = degenerate_reason(league, scoring)
    if reason is not None:
        return RecommendedSplit(
            DEFAULT_HITTER_PERCENT, f"League settings incomplete ({reason}); using {default_split}"
        )

    stages = _run_stages(projections, league, scoring, ValueCalculationSettings())
    hitter_var = positive_var(stages.draftable, PlayerType.HITTER)
    pitcher_var = positive_var(stages.draftable, PlayerType.PITCHER)
    percent = calculated_hitter_percent(hitter_var, pitcher_var)
    if percent is None:
        return RecommendedSplit(
            DEFAULT_HITTER_PERCENT, f"No value above replacement in the draftable pool; using {default_split}"
        )
    share = 100 * hitter_var / (hitter_var + pitcher_var)
    return RecommendedSplit(
        percent,
        f"Hitters hold {share:.0f}% of value above replacement; recommending {percent}/{100 - percent}",
    )
