from dataclasses import dataclass, field
from enum import StrEnum

from auction_values.domain.scoring import PlayerType


class ValuationMethod(StrEnum):
    Z_SCORE = "z-score"
    SGP = "sgp"
    POINTS_ABOVE_REPLACEMENT = "points-above-replacement"


class ReplacementLevelMethod(StrEnum):
    LAST_DRAFTED = "lastDrafted"
    FIRST_UNDRAFTED = "firstUndrafted"
    BLENDED = "blended"


class SplitMethod(StrEnum):
    CALCULATED = "calculated"
    MANUAL = "manual"
    STANDARD = "standard"


class StandardPreset(StrEnum):
    BALANCED = "balanced"
    HITTER_HEAVY = "hitter_heavy"
    PITCHER_HEAVY = "pitcher_heavy"


class ValueTier(StrEnum):
    ELITE = "elite"
    STAR = "star"
    STARTER = "starter"
    BENCH = "bench"
    REPLACEMENT = "replacement"


# Hitter share (percent) for each standard preset.
STANDARD_SPLITS: dict[StandardPreset, int] = {
    StandardPreset.BALANCED: 65,
    StandardPreset.HITTER_HEAVY: 70,
    StandardPreset.PITCHER_HEAVY: 60,
}

DEFAULT_HITTER_PERCENT = 65


@dataclass(frozen=True)
class ValueCalculationSettings:
    method: ValuationMethod = ValuationMethod.Z_SCORE
    replacement_level_method: ReplacementLevelMethod = ReplacementLevelMethod.LAST_DRAFTED
    apply_position_scarcity: bool = False
    split_method: SplitMethod = SplitMethod.CALCULATED
    standard_preset: StandardPreset = StandardPreset.BALANCED
    hitter_budget_percent: float = DEFAULT_HITTER_PERCENT
    show_tiers: bool = True


@dataclass(frozen=True)
class PositionReplacementLevel:
    position: str
    rating: float
    player_name: str | None
    count: int


@dataclass(frozen=True)
class DraftablePlayer:
    """A player holding a roster slot during one valuation run."""

    index: int
    position: str
    player_type: PlayerType
    rating: float
    var: float = 0.0


@dataclass(frozen=True)
class PlayerValue:
    id: str
    name: str
    positions: tuple[str, ...]
    original_value: int
    rank: int
    tier: int
    player_type: PlayerType
    rating: float = 0.0
    team: str | None = None
    adjusted_value: int | None = None
    value_tier: ValueTier | None = None
    is_draftable: bool = False
    assigned_position: str | None = None
    var: float = 0.0
    position_rank: dict[str, int] = field(default_factory=dict)
    is_drafted: bool = False
    draft_price: int | None = None
    drafted_by: str | None = None
    has_pending_bid: bool = False
    is_my_bid: bool = False


@dataclass(frozen=True)
class RecommendedSplit:
    hitter_percent: int
    reason: str
