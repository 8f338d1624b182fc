"""Combine separate hitter and pitcher projection sets into one player pool."""

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass, replace

from auction_values.domain.projection import PlayerProjection
from auction_values.engine.positions import is_hitter_eligible, is_pitcher_eligible, normalize_positions

logger = logging.getLogger(__name__)

_PUNCTUATION = re.compile(r"[.\-']")
_SUFFIXES = re.compile(r"\b(jr|sr|ii|iii|iv)\b")
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class MergeResult:
    projections: list[PlayerProjection]
    two_way: list[str]
    hitters: int
    pitchers: int


def normalize_name(name: str) -> str:
    """Lower-case a player name and drop punctuation and generational suffixes."""
    cleaned = _PUNCTUATION.sub("", name.lower().strip())
    cleaned = _SUFFIXES.sub("", cleaned)
    return _WHITESPACE.sub(" ", cleaned).strip()


def player_key(projection: PlayerProjection) -> str:
    if projection.player_id:
        return f"id:{projection.player_id}"
    return f"name:{normalize_name(projection.name)}:{(projection.team or '').strip().lower()}"


def merge_projections(
    hitters: Sequence[PlayerProjection],
    pitchers: Sequence[PlayerProjection],
) -> MergeResult:
    """Merge pitcher projections into hitter projections.

    Players are matched by id when they carry one, otherwise by normalized
    name and team. A match becomes one two-way player: positions are united
    and the hitter's value wins for any stat both sides project.
    """
    merged: dict[str, PlayerProjection] = {}
    for hitter in hitters:
        merged[player_key(hitter)] = hitter

    two_way: list[str] = []
    for pitcher in pitchers:
        key = player_key(pitcher)
        existing = merged.get(key)
        if existing is None:
            merged[key] = pitcher
            continue
        merged[key] = replace(
            existing,
            positions=frozenset(p.upper() for p in existing.positions | pitcher.positions),
            stats={**pitcher.stats, **existing.stats},
            player_id=existing.player_id or pitcher.player_id,
        )
        two_way.append(existing.name)
        logger.debug("Merged hitter and pitcher projections for %s", existing.name)

    projections = list(merged.values())
    kinds = [normalize_positions(p.positions) for p in projections]
    result = MergeResult(
        projections=projections,
        two_way=two_way,
        hitters=sum(1 for pos in kinds if is_hitter_eligible(pos) and not is_pitcher_eligible(pos)),
        pitchers=sum(1 for pos in kinds if is_pitcher_eligible(pos) and not is_hitter_eligible(pos)),
    )
    logger.info(
        "Merged %d hitters, %d pitchers and %d two-way players",
        result.hitters,
        result.pitchers,
        len(two_way),
    )
    return result
