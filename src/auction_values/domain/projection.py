from dataclasses import dataclass, field


@dataclass(frozen=True)
class PlayerProjection:
    name: str
    positions: frozenset[str]
    stats: dict[str, float] = field(default_factory=dict)
    team: str | None = None
    player_id: str | None = None
