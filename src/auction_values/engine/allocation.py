"""Greedy assignment of rated players to roster slots."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from auction_values.domain.league_settings import LeagueSettings
from auction_values.domain.scoring import PlayerType
from auction_values.domain.valuation import DraftablePlayer, PositionReplacementLevel
from auction_values.engine.positions import BENCH, SLOT_ORDER, is_eligible, slot_player_type

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Allocation:
    draftable: list[DraftablePlayer]
    levels: dict[str, PositionReplacementLevel]
    hitter_count: int
    pitcher_count: int

    def assigned_indices(self) -> set[int]:
        return {d.index for d in self.draftable}


def bench_split(slots: int) -> tuple[int, int]:
    """Split bench slots 60/40 between hitters and pitchers, rounding the hitter share up."""
    hitters = (slots * 3 + 4) // 5
    return hitters, slots - hitters


def ranked_pool(
    ratings: dict[int, float],
    assigned: set[int],
    slot: str | None,
    positions: Sequence[frozenset[str]],
) -> list[int]:
    pool = [i for i in sorted(ratings) if i not in assigned and (slot is None or is_eligible(slot, positions[i]))]
    return sorted(pool, key=lambda i: ratings[i], reverse=True)


def allocate_positions(
    positions: Sequence[frozenset[str]],
    names: Sequence[str],
    league: LeagueSettings,
    hitter_ratings: dict[int, float],
    pitcher_ratings: dict[int, float],
) -> Allocation:
    """Fill every roster slot league-wide, best-rated eligible player first.

    Slots are processed in ``SLOT_ORDER`` and each player fills at most one
    slot. ``positions`` must be normalized. The lowest-rated player placed at
    a slot becomes that slot's replacement marker.
    """
    ratings_by_type = {PlayerType.HITTER: hitter_ratings, PlayerType.PITCHER: pitcher_ratings}
    assigned: set[int] = set()
    draftable: list[DraftablePlayer] = []
    levels: dict[str, PositionReplacementLevel] = {}

    for slot in SLOT_ORDER:
        required = league.slots_for(slot)
        if required <= 0:
            continue
        player_type = slot_player_type(slot)
        ratings = ratings_by_type[player_type]
        chosen = ranked_pool(ratings, assigned, slot, positions)[:required]
        if not chosen:
            logger.debug("No eligible players for %s (%d slots)", slot, required)
            continue
        for i in chosen:
            assigned.add(i)
            draftable.append(DraftablePlayer(index=i, position=slot, player_type=player_type, rating=ratings[i]))
        last = chosen[-1]
        levels[slot] = PositionReplacementLevel(
            position=slot,
            rating=ratings[last],
            player_name=names[last],
            count=len(chosen),
        )
        logger.debug(
            "Filled %d/%d %s slots; replacement %s (%.3f)", len(chosen), required, slot, names[last], ratings[last]
        )

    hitter_share, pitcher_share = bench_split(league.slots_for(BENCH))
    for player_type, share in ((PlayerType.HITTER, hitter_share), (PlayerType.PITCHER, pitcher_share)):
        ratings = ratings_by_type[player_type]
        for i in ranked_pool(ratings, assigned, None, positions)[:share]:
            assigned.add(i)
            draftable.append(DraftablePlayer(index=i, position=BENCH, player_type=player_type, rating=ratings[i]))

    hitter_count = sum(1 for d in draftable if d.player_type is PlayerType.HITTER)
    return Allocation(
        draftable=draftable,
        levels=levels,
        hitter_count=hitter_count,
        pitcher_count=len(draftable) - hitter_count,
    )
