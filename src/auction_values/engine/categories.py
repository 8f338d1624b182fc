"""Per-category metadata shared by the rating methods.

Rate categories are volume-weighted: each one names the counting stat that
serves as its denominator (at-bats for AVG, innings for ERA, ...).
"""

import math

from auction_values.domain.scoring import PlayerType

RATE_VOLUME_STATS: dict[str, str] = {
    "AVG": "AB",
    "SLG": "AB",
    "ISO": "AB",
    "OBP": "PA",
    "OPS": "PA",
    "ERA": "IP",
    "WHIP": "IP",
    "K/9": "IP",
    "BB/9": "IP",
    "K/BB": "IP",
}

_LOWER_IS_BETTER: dict[PlayerType, frozenset[str]] = {
    PlayerType.HITTER: frozenset({"K", "SO", "STRIKEOUT", "STRIKEOUTS", "CS", "CAUGHT STEALING", "GIDP"}),
    PlayerType.PITCHER: frozenset(
        {
            "ERA",
            "WHIP",
            "BB/9",
            "L",
            "LOSS",
            "LOSSES",
            "ER",
            "EARNED RUN",
            "EARNED RUNS",
            "H",
            "HA",
            "HIT ALLOWED",
            "HITS ALLOWED",
            "BB",
            "BBA",
            "WALK ALLOWED",
            "WALKS ALLOWED",
            "HR",
            "HRA",
            "HOME RUN ALLOWED",
            "HOME RUNS ALLOWED",
            "BS",
            "BLOWN SAVE",
            "HIT BY PITCH ALLOWED",
        }
    ),
}

# Points-format category names mapped to the stat keys projection files use.
STAT_ALIASES: dict[str, tuple[str, ...]] = {
    "SINGLE": ("1B",),
    "DOUBLE": ("2B",),
    "TRIPLE": ("3B",),
    "HOME RUN": ("HR",),
    "RUN": ("R",),
    "WALK": ("BB",),
    "STOLEN BASE": ("SB",),
    "CAUGHT STEALING": ("CS",),
    "STRIKEOUT": ("SO", "K"),
    "HIT BY PITCH": ("HBP",),
    "INNING PITCHED": ("IP",),
    "WIN": ("W",),
    "LOSS": ("L",),
    "SAVE": ("SV",),
    "HOLD": ("HLD",),
    "BLOWN SAVE": ("BS",),
    "EARNED RUN": ("ER",),
    "HIT ALLOWED": ("H",),
    "WALK ALLOWED": ("BB",),
    "HOME RUN ALLOWED": ("HR",),
    "HIT BY PITCH ALLOWED": ("HBP",),
    "QUALITY START": ("QS",),
    "COMPLETE GAME": ("CG",),
    "SHUTOUT": ("SHO",),
    "NO HITTER": ("NH",),
    "K": ("SO",),
    "SO": ("K",),
}


def is_rate_category(category: str) -> bool:
    return category.strip().upper() in RATE_VOLUME_STATS


def volume_stat(category: str) -> str | None:
    return RATE_VOLUME_STATS.get(category.strip().upper())


def is_lower_better(category: str, player_type: PlayerType) -> bool:
    return category.strip().upper() in _LOWER_IS_BETTER[player_type]


def stat_value(stats: dict[str, float], category: str) -> float | None:
    """Look up a category in a projection's stats, trying known aliases.

    Returns None when the stat is absent or not a finite number.
    """
    candidates = [category, category.strip().upper(), *STAT_ALIASES.get(category.strip().upper(), ())]
    for key in candidates:
        if key in stats:
            value = stats[key]
            if isinstance(value, bool) or not isinstance(value, int | float):
                return None
            return float(value) if math.isfinite(value) else None
    return None


def is_valid_weight(weight: object) -> bool:
    return not isinstance(weight, bool) and isinstance(weight, int | float) and math.isfinite(weight)
