"""Shared fixtures: a standard 12-team league and a seeded projection pool."""

import random

import pytest

from auction_values.domain.league_settings import STANDARD_POSITIONS, LeagueSettings
from auction_values.domain.projection import PlayerProjection
from auction_values.domain.scoring import (
    DEFAULT_HITTING_CATEGORIES,
    DEFAULT_PITCHING_CATEGORIES,
    CategoryScoring,
    ScoringStyle,
)

_HITTER_POSITIONS = ("C", "1B", "2B", "3B", "SS", "OF", "OF", "OF", "2B/SS", "1B/OF")


def make_hitters(count: int, seed: int = 7) -> list[PlayerProjection]:
    rng = random.Random(seed)
    hitters: list[PlayerProjection] = []
    for i in range(count):
        ab = rng.uniform(250, 650)
        hits = ab * rng.uniform(0.220, 0.310)
        hitters.append(
            PlayerProjection(
                name=f"Hitter {i}",
                positions=frozenset(_HITTER_POSITIONS[i % len(_HITTER_POSITIONS)].split("/")),
                stats={
                    "AB": round(ab),
                    "R": round(ab * rng.uniform(0.09, 0.18)),
                    "HR": round(ab * rng.uniform(0.01, 0.07)),
                    "RBI": round(ab * rng.uniform(0.09, 0.18)),
                    "SB": round(rng.uniform(0, 35)),
                    "AVG": hits / ab,
                },
                player_id=f"h{i}",
            )
        )
    return hitters


def make_pitchers(count: int, seed: int = 11) -> list[PlayerProjection]:
    rng = random.Random(seed)
    pitchers: list[PlayerProjection] = []
    for i in range(count):
        starter = i % 3 != 2
        ip = rng.uniform(120, 200) if starter else rng.uniform(45, 75)
        pitchers.append(
            PlayerProjection(
                name=f"Pitcher {i}",
                positions=frozenset({"SP" if starter else "RP"}),
                stats={
                    "IP": round(ip, 1),
                    "W": round(ip / rng.uniform(12, 20)) if starter else round(rng.uniform(1, 6)),
                    "SV": 0 if starter else round(rng.uniform(0, 40)),
                    "K": round(ip * rng.uniform(0.75, 1.3)),
                    "ERA": rng.uniform(2.6, 5.2),
                    "WHIP": rng.uniform(0.95, 1.45),
                },
                player_id=f"p{i}",
            )
        )
    return pitchers


@pytest.fixture
def standard_league() -> LeagueSettings:
    return LeagueSettings(teams=12, budget=260, roster_spots=23, positions=dict(STANDARD_POSITIONS), name="standard")


@pytest.fixture
def roto_scoring() -> CategoryScoring:
    return CategoryScoring(ScoringStyle.ROTO, DEFAULT_HITTING_CATEGORIES, DEFAULT_PITCHING_CATEGORIES)


@pytest.fixture
def projection_pool() -> list[PlayerProjection]:
    return make_hitters(400) + make_pitchers(240)
