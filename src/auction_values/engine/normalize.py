"""Turn per-category projections into one comparable rating per player."""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from auction_values.domain.projection import PlayerProjection
from auction_values.domain.scoring import CategoryScoring, PlayerType, PointsScoring, ScoringFormat
from auction_values.domain.valuation import ValuationMethod
from auction_values.engine.categories import is_lower_better, is_valid_weight, stat_value, volume_stat

logger = logging.getLogger(__name__)

_MIN_VOLUME_RATIO = 0.1
_EPSILON = 1e-9


@dataclass(frozen=True)
class PlayerRating:
    player_index: int
    category_scores: dict[str, float]
    rating: float


@dataclass(frozen=True)
class _Sample:
    player_index: int
    value: float
    volume: float


def _category_weights(scoring: ScoringFormat, player_type: PlayerType) -> list[tuple[str, float, bool]]:
    """Return ``(category, |weight|, lower_is_better)`` for every usable category."""
    result: list[tuple[str, float, bool]] = []
    for category, weight in scoring.weights(player_type):
        if not is_valid_weight(weight):
            logger.warning("Ignoring %s category %r: weight %r is not numeric", player_type, category, weight)
            continue
        if weight == 0:
            continue
        match scoring:
            case PointsScoring():
                lower = weight < 0
            case CategoryScoring():
                lower = is_lower_better(category, player_type)
        result.append((category, abs(float(weight)), lower))
    return result


def collect_samples(projections: Sequence[PlayerProjection], category: str) -> list[_Sample]:
    """Collect ``(value, volume)`` pairs; counting stats carry an implicit volume of 1."""
    volume_key = volume_stat(category)
    samples: list[_Sample] = []
    for i, proj in enumerate(projections):
        value = stat_value(proj.stats, category)
        if value is None:
            continue
        if volume_key is None:
            samples.append(_Sample(i, value, 1.0))
            continue
        volume = stat_value(proj.stats, volume_key)
        if volume is None or volume <= 0:
            continue
        samples.append(_Sample(i, value, volume))
    return samples


def weighted_mean_std(samples: Sequence[_Sample]) -> tuple[float, float]:
    total_volume = sum(s.volume for s in samples)
    if total_volume <= 0:
        return 0.0, 0.0
    mean = sum(s.value * s.volume for s in samples) / total_volume
    variance = sum(s.volume * (s.value - mean) ** 2 for s in samples) / total_volume
    return mean, math.sqrt(variance)


def _category_scores(
    samples: Sequence[_Sample],
    *,
    lower_is_better: bool,
    is_rate: bool,
    method: ValuationMethod,
    team_count: int,
) -> dict[int, float] | None:
    """Per-player scores for one category, or None when it cannot discriminate."""
    if len(samples) < 2:
        return None
    mean, std = weighted_mean_std(samples)
    if method is ValuationMethod.SGP:
        values = [s.value for s in samples]
        denominator = (max(values) - min(values)) / max(1, team_count - 1)
    else:
        denominator = std
    if denominator < _EPSILON:
        return None

    avg_volume = sum(s.volume for s in samples) / len(samples)
    scores: dict[int, float] = {}
    for s in samples:
        score = (s.value - mean) / denominator
        if is_rate:
            score *= math.sqrt(max(_MIN_VOLUME_RATIO, s.volume / avg_volume))
        scores[s.player_index] = -score if lower_is_better else score
    return scores


def rate_players(
    projections: Sequence[PlayerProjection],
    scoring: ScoringFormat,
    player_type: PlayerType,
    *,
    method: ValuationMethod = ValuationMethod.Z_SCORE,
    team_count: int = 12,
) -> list[PlayerRating]:
    """Rate same-type players; results are aligned with ``projections``.

    Categories with fewer than two usable values or no spread are left out
    of every player's rating.
    """
    if not projections:
        return []

    if method is ValuationMethod.POINTS_ABOVE_REPLACEMENT:
        match scoring:
            case PointsScoring():
                return _fantasy_points(projections, scoring, player_type)
            case CategoryScoring():
                logger.info("Points above replacement needs a points format; rating %ss by z-score", player_type)
                method = ValuationMethod.Z_SCORE

    per_player: list[dict[str, float]] = [{} for _ in projections]
    weighted_totals = [0.0] * len(projections)
    total_weight = 0.0

    for category, weight, lower in _category_weights(scoring, player_type):
        samples = collect_samples(projections, category)
        scores = _category_scores(
            samples,
            lower_is_better=lower,
            is_rate=volume_stat(category) is not None,
            method=method,
            team_count=team_count,
        )
        if scores is None:
            logger.debug("Skipping %s category %r: %d usable values, no spread", player_type, category, len(samples))
            continue
        total_weight += weight
        for index, score in scores.items():
            per_player[index][category] = score
            weighted_totals[index] += score * weight

    return [
        PlayerRating(
            player_index=i,
            category_scores=per_player[i],
            rating=weighted_totals[i] / total_weight if total_weight > 0 else 0.0,
        )
        for i in range(len(projections))
    ]


def _fantasy_points(
    projections: Sequence[PlayerProjection],
    scoring: PointsScoring,
    player_type: PlayerType,
) -> list[PlayerRating]:
    weights = [(cat, float(w)) for cat, w in scoring.weights(player_type) if is_valid_weight(w)]
    result: list[PlayerRating] = []
    for i, proj in enumerate(projections):
        contributions: dict[str, float] = {}
        for category, weight in weights:
            value = stat_value(proj.stats, category)
            if value is not None:
                contributions[category] = value * weight
        result.append(PlayerRating(player_index=i, category_scores=contributions, rating=sum(contributions.values())))
    return result
