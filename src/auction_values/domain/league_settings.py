from dataclasses import dataclass, field


@dataclass(frozen=True)
class LeagueSettings:
    teams: int
    budget: int
    roster_spots: int
    positions: dict[str, int] = field(default_factory=dict)
    name: str = ""

    @property
    def total_budget(self) -> int:
        return self.teams * self.budget

    def slots_for(self, position: str) -> int:
        """League-wide slot count for ``position`` (teams × per-team requirement)."""
        return self.teams * self.positions.get(position, 0)


STANDARD_POSITIONS: dict[str, int] = {
    "C": 1,
    "1B": 1,
    "2B": 1,
    "3B": 1,
    "SS": 1,
    "OF": 3,
    "MI": 0,
    "CI": 0,
    "UTIL": 1,
    "SP": 5,
    "RP": 3,
    "P": 0,
    "BENCH": 6,
}
