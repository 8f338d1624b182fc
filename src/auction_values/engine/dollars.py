"""Convert value above replacement into auction dollars that sum to the league budget."""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from auction_values.domain.league_settings import LeagueSettings
from auction_values.domain.scoring import PlayerType
from auction_values.domain.valuation import (
    STANDARD_SPLITS,
    DraftablePlayer,
    SplitMethod,
    ValueCalculationSettings,
    ValueTier,
)

logger = logging.getLogger(__name__)

MIN_BID = 1
TIER_SIZE = 20
MIN_HITTER_PERCENT = 40
MAX_HITTER_PERCENT = 80

_VALUE_TIER_CUTOFFS: tuple[tuple[float, ValueTier], ...] = (
    (95.0, ValueTier.ELITE),
    (85.0, ValueTier.STAR),
    (50.0, ValueTier.STARTER),
    (20.0, ValueTier.BENCH),
)


@dataclass(frozen=True)
class DollarAllocation:
    values: dict[int, int]
    hitter_percent: float
    dollars_per_var: dict[PlayerType, float]
    scale: float


def positive_var(draftable: Sequence[DraftablePlayer], player_type: PlayerType) -> float:
    return sum(d.var for d in draftable if d.player_type is player_type and d.var > 0)


def calculated_hitter_percent(hitter_var: float, pitcher_var: float) -> int | None:
    """Hitters' share of positive VAR, rounded to the nearest 5 and clamped to [40, 80].

    Returns None when there is no positive VAR to split.
    """
    total = hitter_var + pitcher_var
    if total <= 0:
        return None
    rounded = 5 * math.floor(hitter_var / total * 100 / 5 + 0.5)
    return min(MAX_HITTER_PERCENT, max(MIN_HITTER_PERCENT, rounded))


def resolve_hitter_percent(settings: ValueCalculationSettings, draftable: Sequence[DraftablePlayer]) -> float:
    match settings.split_method:
        case SplitMethod.MANUAL:
            return settings.hitter_budget_percent
        case SplitMethod.STANDARD:
            return STANDARD_SPLITS[settings.standard_preset]
        case SplitMethod.CALCULATED:
            calculated = calculated_hitter_percent(
                positive_var(draftable, PlayerType.HITTER),
                positive_var(draftable, PlayerType.PITCHER),
            )
            return settings.hitter_budget_percent if calculated is None else calculated


def convert_to_dollars(
    draftable: Sequence[DraftablePlayer],
    league: LeagueSettings,
    settings: ValueCalculationSettings,
) -> DollarAllocation:
    """Dollar value per draftable player index.

    Each roster spot keeps a $1 floor; the rest of the budget is split between
    hitters and pitchers and shared out in proportion to VAR. A uniform scale on
    the VAR dollars alone makes the values reconcile to the league budget, so
    a zero-VAR player stays at exactly $1 even when one side holds no VAR.
    """
    total_budget = league.total_budget
    distributable = max(0, total_budget - MIN_BID * len(draftable))
    hitter_percent = resolve_hitter_percent(settings, draftable)
    hitter_dollars = distributable * hitter_percent / 100
    type_dollars = {PlayerType.HITTER: hitter_dollars, PlayerType.PITCHER: distributable - hitter_dollars}

    dollars_per_var: dict[PlayerType, float] = {}
    for player_type, dollars in type_dollars.items():
        var_total = positive_var(draftable, player_type)
        dollars_per_var[player_type] = dollars / var_total if var_total > 0 else 0.0

    surplus = {d.index: d.var * dollars_per_var[d.player_type] if d.var > 0 else 0.0 for d in draftable}
    surplus_total = sum(surplus.values())
    scale = distributable / surplus_total if surplus_total > 0 else 0.0
    values = {index: max(MIN_BID, round(MIN_BID + extra * scale)) for index, extra in surplus.items()}

    logger.info(
        "Split $%d: %.0f%% hitters, $/VAR hitters=%.2f pitchers=%.2f, scale=%.4f",
        total_budget,
        hitter_percent,
        dollars_per_var[PlayerType.HITTER],
        dollars_per_var[PlayerType.PITCHER],
        scale,
    )
    return DollarAllocation(values=values, hitter_percent=hitter_percent, dollars_per_var=dollars_per_var, scale=scale)


def tier_for_rank(rank: int) -> int:
    return (rank - 1) // TIER_SIZE + 1


def value_tier_for_percentile(percentile: float) -> ValueTier:
    for cutoff, tier in _VALUE_TIER_CUTOFFS:
        if percentile >= cutoff:
            return tier
    return ValueTier.REPLACEMENT


def assign_value_tiers(draftable: Sequence[DraftablePlayer]) -> dict[int, ValueTier]:
    """Qualitative tier from each player's percentile among positive-VAR players."""
    positive = sorted((d for d in draftable if d.var > 0), key=lambda d: d.var, reverse=True)
    n = len(positive)
    tiers = {d.index: ValueTier.REPLACEMENT for d in draftable}
    for position, player in enumerate(positive):
        tiers[player.index] = value_tier_for_percentile(100.0 * (n - position) / n)
    return tiers
