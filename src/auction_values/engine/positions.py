from auction_values.domain.scoring import PlayerType

PITCHER_POSITIONS: frozenset[str] = frozenset({"SP", "RP", "P"})

# Slots are filled in this order; earlier slots win players eligible for several.
HITTER_SLOT_ORDER: tuple[str, ...] = ("C", "1B", "2B", "3B", "SS", "OF", "MI", "CI", "UTIL")
PITCHER_SLOT_ORDER: tuple[str, ...] = ("SP", "RP", "P")
SLOT_ORDER: tuple[str, ...] = HITTER_SLOT_ORDER + PITCHER_SLOT_ORDER
BENCH = "BENCH"

_POSITION_NORMALIZATIONS: dict[str, str] = {
    "LF": "OF",
    "CF": "OF",
    "RF": "OF",
    "DH": "UTIL",
    "UT": "UTIL",
    "U": "UTIL",
}

_FLEX_RULES: dict[str, frozenset[str]] = {
    "MI": frozenset({"MI", "2B", "SS"}),
    "CI": frozenset({"CI", "1B", "3B"}),
    "P": frozenset({"P", "SP", "RP"}),
}


def normalize_position(pos: str) -> str:
    code = pos.strip().upper()
    return _POSITION_NORMALIZATIONS.get(code, code)


def normalize_positions(positions: frozenset[str] | tuple[str, ...] | list[str]) -> frozenset[str]:
    return frozenset(normalize_position(p) for p in positions if p.strip())


def is_pitcher_position(pos: str) -> bool:
    return normalize_position(pos) in PITCHER_POSITIONS


def is_hitter_eligible(positions: frozenset[str]) -> bool:
    return any(not is_pitcher_position(p) for p in positions)


def is_pitcher_eligible(positions: frozenset[str]) -> bool:
    return any(is_pitcher_position(p) for p in positions)


def slot_player_type(slot: str) -> PlayerType:
    return PlayerType.PITCHER if slot in PITCHER_POSITIONS else PlayerType.HITTER


def is_eligible(slot: str, positions: frozenset[str]) -> bool:
    """Whether a player listing ``positions`` may fill ``slot``.

    ``positions`` must already be normalized.
    """
    if slot == "UTIL":
        return is_hitter_eligible(positions)
    allowed = _FLEX_RULES.get(slot)
    if allowed is not None:
        return not allowed.isdisjoint(positions)
    return slot in positions


def sort_positions(positions: frozenset[str]) -> tuple[str, ...]:
    """Order position codes by roster-slot order, unknown codes last."""
    rank = {slot: i for i, slot in enumerate(SLOT_ORDER)}
    return tuple(sorted(positions, key=lambda p: (rank.get(p, len(rank)), p)))
