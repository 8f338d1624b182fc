"""Live auction values as the draft consumes the league budget.

Pure function of its inputs: callers re-run it after every pick, edit, undo
or pending-bid change.
"""

import dataclasses
import logging
from collections.abc import Sequence

from auction_values.domain.draft import DraftPick, InflationResult, PendingBid
from auction_values.domain.league_settings import LeagueSettings
from auction_values.domain.valuation import PlayerValue
from auction_values.engine.dollars import MIN_BID

logger = logging.getLogger(__name__)


def _clear_draft_state(value: PlayerValue) -> PlayerValue:
    return dataclasses.replace(
        value,
        adjusted_value=value.original_value,
        is_drafted=False,
        draft_price=None,
        drafted_by=None,
        has_pending_bid=False,
        is_my_bid=False,
    )


def calculate_inflation(
    player_values: Sequence[PlayerValue],
    draft_picks: Sequence[DraftPick],
    league: LeagueSettings,
    pending_bids: Sequence[PendingBid] = (),
) -> InflationResult:
    """Scale the remaining players' values to the budget still left to spend.

    Confirmed picks and pending bids both count as spent. Drafted players keep
    their base value; players with a pending bid are valued at the bid.
    """
    picks = {p.player_id: p for p in draft_picks}
    pending = {b.player_id: b for b in pending_bids if b.player_id not in picks}
    if not picks and not pending:
        return InflationResult(inflation_rate=0.0, adjusted_values=[_clear_draft_state(v) for v in player_values])

    total_spent = sum(p.price for p in picks.values()) + sum(b.price for b in pending.values())
    remaining_budget = league.total_budget - total_spent
    remaining_value = sum(v.original_value for v in player_values if v.id not in picks and v.id not in pending)

    inflating = remaining_value > 0 and remaining_budget > 0
    if not inflating:
        logger.debug("No budget or value left (budget=%d, value=%d); inflation off", remaining_budget, remaining_value)
        inflation_rate = 0.0
    else:
        inflation_rate = remaining_budget / remaining_value - 1

    adjusted: list[PlayerValue] = []
    for value in player_values:
        base = _clear_draft_state(value)
        pick = picks.get(value.id)
        bid = pending.get(value.id)
        if pick is not None:
            adjusted.append(
                dataclasses.replace(base, is_drafted=True, draft_price=pick.price, drafted_by=pick.drafted_by)
            )
        elif bid is not None:
            adjusted.append(
                dataclasses.replace(base, adjusted_value=bid.price, has_pending_bid=True, is_my_bid=bid.is_my_bid)
            )
        elif inflating:
            live = max(MIN_BID, round(value.original_value * (1 + inflation_rate)))
            adjusted.append(dataclasses.replace(base, adjusted_value=live))
        else:
            adjusted.append(base)

    logger.debug(
        "Spent $%d of $%d; remaining value $%d; inflation %.4f",
        total_spent,
        league.total_budget,
        remaining_value,
        inflation_rate,
    )
    return InflationResult(inflation_rate=inflation_rate, adjusted_values=adjusted)
