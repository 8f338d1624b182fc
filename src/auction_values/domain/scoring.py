from dataclasses import dataclass, field
from enum import StrEnum
from typing import TypeAlias


class PlayerType(StrEnum):
    HITTER = "hitter"
    PITCHER = "pitcher"


class ScoringStyle(StrEnum):
    ROTO = "roto"
    H2H_CATEGORIES = "h2h-categories"
    H2H_POINTS = "h2h-points"


@dataclass(frozen=True)
class CategoryScoring:
    """Roto or head-to-head categories: every category weighs 1."""

    style: ScoringStyle
    hitting_categories: tuple[str, ...]
    pitching_categories: tuple[str, ...]

    def weights(self, player_type: PlayerType) -> list[tuple[str, float]]:
        cats = self.hitting_categories if player_type is PlayerType.HITTER else self.pitching_categories
        return [(cat, 1.0) for cat in cats]


@dataclass(frozen=True)
class PointsScoring:
    """Head-to-head points: each category carries a signed point value."""

    hitting_points: dict[str, float] = field(default_factory=dict)
    pitching_points: dict[str, float] = field(default_factory=dict)
    style: ScoringStyle = ScoringStyle.H2H_POINTS

    def weights(self, player_type: PlayerType) -> list[tuple[str, float]]:
        points = self.hitting_points if player_type is PlayerType.HITTER else self.pitching_points
        return list(points.items())


ScoringFormat: TypeAlias = CategoryScoring | PointsScoring


DEFAULT_HITTING_CATEGORIES: tuple[str, ...] = ("R", "HR", "RBI", "SB", "AVG")
DEFAULT_PITCHING_CATEGORIES: tuple[str, ...] = ("W", "SV", "K", "ERA", "WHIP")
