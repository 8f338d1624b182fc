import dataclasses
import logging
import statistics
from collections.abc import Sequence

from auction_values.domain.scoring import PlayerType
from auction_values.domain.valuation import DraftablePlayer, PositionReplacementLevel
from auction_values.engine.positions import slot_player_type

logger = logging.getLogger(__name__)

# Players rated below this never earn value, however weak their position is.
RATING_FLOOR = -1.5

SCARCITY_BASE = 0.85
SCARCITY_SLOPE = 0.3
SCARCITY_MIN = 0.85
SCARCITY_MAX = 1.4


def average_replacement(levels: dict[str, PositionReplacementLevel], player_type: PlayerType) -> float:
    ratings = [lvl.rating for slot, lvl in levels.items() if slot_player_type(slot) is player_type]
    return statistics.mean(ratings) if ratings else 0.0


def scarcity_multipliers(
    draftable: Sequence[DraftablePlayer],
    levels: dict[str, PositionReplacementLevel],
) -> dict[str, float]:
    """Per-slot multiplier from the drop-off between the best player and replacement.

    Returns an empty mapping when no slot shows a positive average drop-off.
    """
    drop_offs: dict[str, float] = {}
    for slot, level in levels.items():
        ratings = [d.rating for d in draftable if d.position == slot]
        if ratings:
            drop_offs[slot] = max(ratings) - level.rating
    if not drop_offs:
        return {}
    avg_drop_off = statistics.mean(drop_offs.values())
    if avg_drop_off <= 0:
        logger.debug("Average drop-off %.3f is not positive; skipping scarcity", avg_drop_off)
        return {}
    return {
        slot: min(SCARCITY_MAX, max(SCARCITY_MIN, SCARCITY_BASE + SCARCITY_SLOPE * (drop_off / avg_drop_off)))
        for slot, drop_off in drop_offs.items()
    }


def compute_var(
    draftable: Sequence[DraftablePlayer],
    levels: dict[str, PositionReplacementLevel],
    *,
    apply_scarcity: bool = False,
) -> list[DraftablePlayer]:
    """Value above replacement for every draftable player; never negative."""
    fallback = {pt: average_replacement(levels, pt) for pt in PlayerType}
    multipliers = scarcity_multipliers(draftable, levels) if apply_scarcity else {}
    if multipliers:
        logger.debug("Scarcity multipliers: %s", {k: round(v, 3) for k, v in multipliers.items()})

    result: list[DraftablePlayer] = []
    for player in draftable:
        if player.rating < RATING_FLOOR:
            var = 0.0
        else:
            level = levels.get(player.position)
            replacement = level.rating if level is not None else fallback[player.player_type]
            var = max(0.0, player.rating - replacement) * multipliers.get(player.position, 1.0)
        result.append(dataclasses.replace(player, var=var))
    return result
