from dataclasses import dataclass

from auction_values.domain.valuation import PlayerValue


@dataclass(frozen=True)
class DraftPick:
    player_id: str
    price: int
    pick_number: int
    is_my_bid: bool = False
    drafted_by: str | None = None
    timestamp: float = 0.0


@dataclass(frozen=True)
class PendingBid:
    player_id: str
    price: int
    is_my_bid: bool = False


@dataclass(frozen=True)
class InflationResult:
    inflation_rate: float
    adjusted_values: list[PlayerValue]


@dataclass(frozen=True)
class DraftSummary:
    total_budget: int
    total_spent: int
    remaining_budget: int
    players_drafted: int
    my_spent: int
    my_players_drafted: int
    my_remaining_budget: int
    inflation_rate: float


@dataclass(frozen=True)
class PositionNeed:
    position: str
    required: int
    filled: int
    remaining: int
    budget_per_spot: int
