import dataclasses
import logging
import statistics
from collections.abc import Sequence

from auction_values.domain.scoring import PlayerType
from auction_values.domain.valuation import PositionReplacementLevel, ReplacementLevelMethod
from auction_values.engine.allocation import Allocation, ranked_pool
from auction_values.engine.positions import slot_player_type

logger = logging.getLogger(__name__)

_BLEND_DEPTH = 2


def resolve_replacement_levels(
    allocation: Allocation,
    positions: Sequence[frozenset[str]],
    names: Sequence[str],
    hitter_ratings: dict[int, float],
    pitcher_ratings: dict[int, float],
    method: ReplacementLevelMethod,
) -> dict[str, PositionReplacementLevel]:
    """Adjust each slot's replacement marker according to ``method``.

    ``lastDrafted`` keeps the allocation markers. ``firstUndrafted`` moves each
    marker to the best eligible player left out of the draftable pool.
    ``blended`` averages the two weakest drafted and two best undrafted ratings.
    """
    if method is ReplacementLevelMethod.LAST_DRAFTED:
        return dict(allocation.levels)

    ratings_by_type = {PlayerType.HITTER: hitter_ratings, PlayerType.PITCHER: pitcher_ratings}
    assigned = allocation.assigned_indices()
    resolved: dict[str, PositionReplacementLevel] = {}

    for slot, level in allocation.levels.items():
        ratings = ratings_by_type[slot_player_type(slot)]
        undrafted = ranked_pool(ratings, assigned, slot, positions)

        if method is ReplacementLevelMethod.FIRST_UNDRAFTED:
            if undrafted:
                best = undrafted[0]
                level = dataclasses.replace(level, rating=ratings[best], player_name=names[best])
        else:
            drafted = sorted(d.rating for d in allocation.draftable if d.position == slot)
            blend = drafted[:_BLEND_DEPTH] + [ratings[i] for i in undrafted[:_BLEND_DEPTH]]
            if blend:
                level = dataclasses.replace(level, rating=statistics.mean(blend))

        logger.debug("%s replacement (%s): %.3f", slot, method, level.rating)
        resolved[slot] = level
    return resolved
