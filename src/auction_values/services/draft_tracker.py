from collections.abc import Sequence

from auction_values.domain.draft import DraftPick, DraftSummary, PositionNeed
from auction_values.domain.league_settings import LeagueSettings
from auction_values.domain.valuation import PlayerValue
from auction_values.engine.positions import SLOT_ORDER, is_eligible

_FLEX_SLOTS: tuple[str, ...] = ("MI", "CI", "UTIL", "P")
_PRIMARY_SLOTS: tuple[str, ...] = tuple(s for s in SLOT_ORDER if s not in _FLEX_SLOTS)


def summarize_draft(
    picks: Sequence[DraftPick],
    league: LeagueSettings,
    inflation_rate: float = 0.0,
) -> DraftSummary:
    """Budget and roster totals for the draft-room header."""
    total_spent = sum(p.price for p in picks)
    mine = [p for p in picks if p.is_my_bid]
    my_spent = sum(p.price for p in mine)
    return DraftSummary(
        total_budget=league.total_budget,
        total_spent=total_spent,
        remaining_budget=league.total_budget - total_spent,
        players_drafted=len(picks),
        my_spent=my_spent,
        my_players_drafted=len(mine),
        my_remaining_budget=league.budget - my_spent,
        inflation_rate=inflation_rate,
    )


def position_needs(
    player_values: Sequence[PlayerValue],
    picks: Sequence[DraftPick],
    league: LeagueSettings,
) -> list[PositionNeed]:
    """Filled and open starting slots on my roster, in slot order.

    My players are placed most-constrained first: each takes the primary slot
    with the most room, then the first open flex slot it qualifies for.
    Players that fit nowhere (bench) are not counted.
    """
    mine = [p for p in picks if p.is_my_bid]
    my_ids = {p.player_id for p in mine}
    required = {slot: league.positions.get(slot, 0) for slot in SLOT_ORDER}
    filled = dict.fromkeys(SLOT_ORDER, 0)

    drafted = sorted((v for v in player_values if v.id in my_ids), key=lambda v: len(v.positions))
    for player in drafted:
        positions = frozenset(player.positions)
        primary = sorted(
            (s for s in _PRIMARY_SLOTS if s in positions),
            key=lambda s: required[s] - filled[s],
            reverse=True,
        )
        flex = [s for s in _FLEX_SLOTS if is_eligible(s, positions)]
        for slot in primary + flex:
            if filled[slot] < required[slot]:
                filled[slot] += 1
                break

    open_slots = [slot for slot in SLOT_ORDER if required[slot] > 0]
    total_remaining = sum(max(0, required[s] - filled[s]) for s in open_slots)
    remaining_budget = league.budget - sum(p.price for p in mine)
    per_spot = round(remaining_budget / total_remaining) if total_remaining > 0 else 0
    return [
        PositionNeed(
            position=slot,
            required=required[slot],
            filled=filled[slot],
            remaining=max(0, required[slot] - filled[slot]),
            budget_per_spot=per_spot,
        )
        for slot in open_slots
    ]
