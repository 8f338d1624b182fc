import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar

from auction_values.domain.league_settings import STANDARD_POSITIONS, LeagueSettings
from auction_values.domain.scoring import CategoryScoring, PointsScoring, ScoringFormat, ScoringStyle
from auction_values.domain.valuation import (
    ReplacementLevelMethod,
    SplitMethod,
    StandardPreset,
    ValuationMethod,
    ValueCalculationSettings,
)
from auction_values.engine.categories import is_valid_weight
from auction_values.engine.positions import BENCH, SLOT_ORDER
from auction_values.scoring_presets import get_preset

_CONFIG_FILENAME = "auction.toml"
_KNOWN_POSITIONS = frozenset(SLOT_ORDER) | {BENCH}


class LeagueConfigError(Exception):
    """Raised when league configuration is invalid or missing."""


@dataclass(frozen=True)
class LeagueConfig:
    league: LeagueSettings
    scoring: ScoringFormat
    valuation: ValueCalculationSettings


# -- Validation --------------------------------------------------------------


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_league(settings: LeagueSettings) -> None:
    for field in ("teams", "budget", "roster_spots"):
        value = getattr(settings, field)
        if not _is_int(value):
            raise LeagueConfigError(f"League '{settings.name}': {field} must be an integer, got {value!r}")
    if settings.teams <= 0:
        raise LeagueConfigError(f"League '{settings.name}': teams must be > 0, got {settings.teams}")
    if settings.budget <= 0:
        raise LeagueConfigError(f"League '{settings.name}': budget must be > 0, got {settings.budget}")
    if settings.roster_spots < 0:
        raise LeagueConfigError(f"League '{settings.name}': roster_spots must be >= 0, got {settings.roster_spots}")
    for position, count in settings.positions.items():
        if position not in _KNOWN_POSITIONS:
            raise LeagueConfigError(f"League '{settings.name}': unknown position '{position}'")
        if not _is_int(count) or count < 0:
            raise LeagueConfigError(
                f"League '{settings.name}': {position} slots must be an integer >= 0, got {count!r}"
            )


def validate_scoring(scoring: ScoringFormat, context: str) -> None:
    match scoring:
        case CategoryScoring():
            if not scoring.hitting_categories and not scoring.pitching_categories:
                raise LeagueConfigError(f"{context}: scoring needs at least one category")
        case PointsScoring():
            tables = (("hitting_points", scoring.hitting_points), ("pitching_points", scoring.pitching_points))
            for table, points in tables:
                for category, weight in points.items():
                    if not is_valid_weight(weight):
                        raise LeagueConfigError(f"{context}: {table} '{category}' must be a number, got {weight!r}")


# -- Parsing -----------------------------------------------------------------


def _require_field(raw: dict[str, Any], field: str, context: str) -> Any:
    if field not in raw:
        raise LeagueConfigError(f"{context}: missing required field '{field}'")
    return raw[field]


E = TypeVar("E")


def _parse_enum(enum_type: type[E], raw: Any, field: str, context: str) -> E:
    try:
        return enum_type(raw)  # type: ignore[call-arg]
    except ValueError:
        raise LeagueConfigError(f"{context}: invalid {field} '{raw}'") from None


def _parse_bool(raw: dict[str, Any], field: str, default: bool, context: str) -> bool:
    value = raw.get(field, default)
    if not isinstance(value, bool):
        raise LeagueConfigError(f"{context}: {field} must be true or false, got {value!r}")
    return value


def parse_scoring(raw: dict[str, Any], context: str) -> ScoringFormat:
    if "preset" in raw:
        preset = get_preset(raw["preset"])
        if preset is None:
            raise LeagueConfigError(f"{context}: unknown scoring preset '{raw['preset']}'")
        return preset.scoring

    style = _parse_enum(ScoringStyle, _require_field(raw, "type", context), "scoring type", context)
    scoring: ScoringFormat
    if style is ScoringStyle.H2H_POINTS:
        scoring = PointsScoring(
            hitting_points=dict(raw.get("hitting_points", {})),
            pitching_points=dict(raw.get("pitching_points", {})),
        )
    else:
        scoring = CategoryScoring(
            style=style,
            hitting_categories=tuple(raw.get("hitting_categories", ())),
            pitching_categories=tuple(raw.get("pitching_categories", ())),
        )
    validate_scoring(scoring, context)
    return scoring


def parse_valuation(raw: dict[str, Any], context: str) -> ValueCalculationSettings:
    defaults = ValueCalculationSettings()
    percent = raw.get("hitter_budget_percent", defaults.hitter_budget_percent)
    if not is_valid_weight(percent) or not 0 <= percent <= 100:
        raise LeagueConfigError(f"{context}: hitter_budget_percent must be within [0, 100], got {percent!r}")
    return ValueCalculationSettings(
        method=_parse_enum(ValuationMethod, raw.get("method", defaults.method), "method", context),
        replacement_level_method=_parse_enum(
            ReplacementLevelMethod,
            raw.get("replacement_level_method", defaults.replacement_level_method),
            "replacement_level_method",
            context,
        ),
        apply_position_scarcity=_parse_bool(
            raw, "apply_position_scarcity", defaults.apply_position_scarcity, context
        ),
        split_method=_parse_enum(SplitMethod, raw.get("split_method", defaults.split_method), "split_method", context),
        standard_preset=_parse_enum(
            StandardPreset, raw.get("standard_preset", defaults.standard_preset), "standard_preset", context
        ),
        hitter_budget_percent=float(percent),
        show_tiers=_parse_bool(raw, "show_tiers", defaults.show_tiers, context),
    )


def parse_league(name: str, raw: dict[str, Any]) -> LeagueConfig:
    context = f"League '{name}'"

    teams: int = _require_field(raw, "teams", context)
    budget: int = _require_field(raw, "budget", context)
    positions = {pos.strip().upper(): count for pos, count in raw.get("positions", STANDARD_POSITIONS).items()}
    roster_spots: int = raw.get("roster_spots", sum(c for c in positions.values() if isinstance(c, int)))

    settings = LeagueSettings(
        name=name,
        teams=teams,
        budget=budget,
        roster_spots=roster_spots,
        positions=positions,
    )
    validate_league(settings)

    scoring = parse_scoring(_require_field(raw, "scoring", context), context)
    valuation = parse_valuation(raw.get("valuation", {}), context)
    return LeagueConfig(league=settings, scoring=scoring, valuation=valuation)


# -- TOML loading ------------------------------------------------------------


def _read_leagues(config_dir: Path) -> dict[str, Any] | None:
    toml_path = config_dir / _CONFIG_FILENAME
    if not toml_path.exists():
        return None
    with toml_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise LeagueConfigError(f"{_CONFIG_FILENAME} is not valid TOML: {e}") from e
    return data.get("leagues")


def load_league(name: str, config_dir: Path) -> LeagueConfig:
    if not (config_dir / _CONFIG_FILENAME).exists():
        raise LeagueConfigError(f"{_CONFIG_FILENAME} not found in {config_dir}")

    leagues = _read_leagues(config_dir)
    if leagues is None:
        raise LeagueConfigError(f"No [leagues] section in {_CONFIG_FILENAME}")

    if name not in leagues:
        raise LeagueConfigError(f"League '{name}' not found in {_CONFIG_FILENAME}")

    return parse_league(name, leagues[name])


def list_leagues(config_dir: Path) -> list[str]:
    leagues = _read_leagues(config_dir)
    if leagues is None:
        return []
    return sorted(leagues.keys())
