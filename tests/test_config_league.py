from pathlib import Path

import pytest

from auction_values.config_league import (
    LeagueConfigError,
    list_leagues,
    load_league,
    parse_league,
    parse_scoring,
    parse_valuation,
    validate_league,
)
from auction_values.domain.league_settings import STANDARD_POSITIONS, LeagueSettings
from auction_values.domain.scoring import CategoryScoring, PointsScoring, ScoringStyle
from auction_values.domain.valuation import (
    ReplacementLevelMethod,
    SplitMethod,
    StandardPreset,
    ValuationMethod,
)

_FULL_TOML = """\
[leagues.main]
teams = 12
budget = 260

[leagues.main.scoring]
type = "roto"
hitting_categories = ["R", "HR", "RBI", "SB", "AVG"]
pitching_categories = ["W", "SV", "K", "ERA", "WHIP"]

[leagues.main.valuation]
method = "sgp"
replacement_level_method = "blended"
split_method = "standard"
standard_preset = "hitter_heavy"

[leagues.side]
teams = 10
budget = 200

[leagues.side.positions]
c = 2
of = 5
sp = 6
rp = 3

[leagues.side.scoring]
preset = "yahoo-h2h-points"
"""


class TestParseLeague:
    def test_defaults_to_standard_positions(self) -> None:
        config = parse_league("x", {"teams": 12, "budget": 260, "scoring": {"preset": "espn-roto-5x5"}})
        assert config.league.positions == STANDARD_POSITIONS
        assert config.league.roster_spots == 23
        assert config.league.name == "x"

    def test_positions_upper_cased(self) -> None:
        raw = {"teams": 10, "budget": 200, "positions": {"c": 1, "util": 2}, "scoring": {"preset": "espn-roto-5x5"}}
        config = parse_league("x", raw)
        assert config.league.positions == {"C": 1, "UTIL": 2}
        assert config.league.roster_spots == 3

    def test_explicit_roster_spots(self) -> None:
        raw = {"teams": 10, "budget": 200, "roster_spots": 25, "scoring": {"preset": "espn-roto-5x5"}}
        assert parse_league("x", raw).league.roster_spots == 25

    def test_missing_teams(self) -> None:
        with pytest.raises(LeagueConfigError, match="teams"):
            parse_league("x", {"budget": 260, "scoring": {"preset": "espn-roto-5x5"}})

    def test_missing_scoring(self) -> None:
        with pytest.raises(LeagueConfigError, match="scoring"):
            parse_league("x", {"teams": 12, "budget": 260})

    def test_unknown_position(self) -> None:
        raw = {"teams": 12, "budget": 260, "positions": {"DH2": 1}, "scoring": {"preset": "espn-roto-5x5"}}
        with pytest.raises(LeagueConfigError, match="unknown position 'DH2'"):
            parse_league("x", raw)

    def test_teams_must_be_integer(self) -> None:
        with pytest.raises(LeagueConfigError, match="teams must be an integer, got '12'"):
            parse_league("x", {"teams": "12", "budget": 260, "scoring": {"preset": "espn-roto-5x5"}})

    def test_budget_must_not_be_bool(self) -> None:
        with pytest.raises(LeagueConfigError, match="budget must be an integer"):
            parse_league("x", {"teams": 12, "budget": True, "scoring": {"preset": "espn-roto-5x5"}})


class TestValidateLeague:
    def test_zero_teams(self) -> None:
        with pytest.raises(LeagueConfigError, match="teams"):
            validate_league(LeagueSettings(teams=0, budget=260, roster_spots=23, name="x"))

    def test_negative_budget(self) -> None:
        with pytest.raises(LeagueConfigError, match="budget"):
            validate_league(LeagueSettings(teams=12, budget=-1, roster_spots=23, name="x"))

    def test_negative_slot_count(self) -> None:
        with pytest.raises(LeagueConfigError, match="OF slots"):
            validate_league(LeagueSettings(teams=12, budget=260, roster_spots=23, positions={"OF": -1}, name="x"))


class TestParseScoring:
    def test_preset(self) -> None:
        scoring = parse_scoring({"preset": "espn-roto-5x5"}, "ctx")
        assert isinstance(scoring, CategoryScoring)
        assert scoring.style is ScoringStyle.ROTO

    def test_unknown_preset(self) -> None:
        with pytest.raises(LeagueConfigError, match="unknown scoring preset"):
            parse_scoring({"preset": "nope"}, "ctx")

    def test_points(self) -> None:
        raw = {"type": "h2h-points", "hitting_points": {"HR": 4}, "pitching_points": {"L": -3}}
        scoring = parse_scoring(raw, "ctx")
        assert scoring == PointsScoring(hitting_points={"HR": 4}, pitching_points={"L": -3})

    def test_points_weight_must_be_number(self) -> None:
        with pytest.raises(LeagueConfigError, match="hitting_points 'HR'"):
            parse_scoring({"type": "h2h-points", "hitting_points": {"HR": "four"}}, "ctx")

    def test_categories_required(self) -> None:
        with pytest.raises(LeagueConfigError, match="at least one category"):
            parse_scoring({"type": "roto"}, "ctx")

    def test_invalid_type(self) -> None:
        with pytest.raises(LeagueConfigError, match="invalid scoring type 'bogus'"):
            parse_scoring({"type": "bogus"}, "ctx")


class TestParseValuation:
    def test_defaults(self) -> None:
        settings = parse_valuation({}, "ctx")
        assert settings.method is ValuationMethod.Z_SCORE
        assert settings.replacement_level_method is ReplacementLevelMethod.LAST_DRAFTED
        assert settings.split_method is SplitMethod.CALCULATED
        assert settings.hitter_budget_percent == 65
        assert settings.show_tiers

    def test_percent_out_of_range(self) -> None:
        with pytest.raises(LeagueConfigError, match="hitter_budget_percent"):
            parse_valuation({"hitter_budget_percent": 120}, "ctx")

    def test_invalid_method(self) -> None:
        with pytest.raises(LeagueConfigError, match="invalid method"):
            parse_valuation({"method": "war"}, "ctx")

    def test_flag_must_be_boolean(self) -> None:
        with pytest.raises(LeagueConfigError, match="show_tiers must be true or false"):
            parse_valuation({"show_tiers": "false"}, "ctx")

    def test_flags_read_as_booleans(self) -> None:
        settings = parse_valuation({"apply_position_scarcity": True, "show_tiers": False}, "ctx")
        assert settings.apply_position_scarcity
        assert not settings.show_tiers


class TestLoadLeague:
    def test_load_existing(self, tmp_path: Path) -> None:
        (tmp_path / "auction.toml").write_text(_FULL_TOML)
        config = load_league("main", tmp_path)
        assert config.league.teams == 12
        assert config.league.total_budget == 3120
        assert config.valuation.method is ValuationMethod.SGP
        assert config.valuation.replacement_level_method is ReplacementLevelMethod.BLENDED
        assert config.valuation.standard_preset is StandardPreset.HITTER_HEAVY

    def test_load_second_league(self, tmp_path: Path) -> None:
        (tmp_path / "auction.toml").write_text(_FULL_TOML)
        config = load_league("side", tmp_path)
        assert config.league.positions == {"C": 2, "OF": 5, "SP": 6, "RP": 3}
        assert isinstance(config.scoring, PointsScoring)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(LeagueConfigError, match="auction.toml"):
            load_league("main", tmp_path)

    def test_no_leagues_section(self, tmp_path: Path) -> None:
        (tmp_path / "auction.toml").write_text("[other]\nkey = 1\n")
        with pytest.raises(LeagueConfigError, match="leagues"):
            load_league("main", tmp_path)

    def test_league_not_found(self, tmp_path: Path) -> None:
        (tmp_path / "auction.toml").write_text(_FULL_TOML)
        with pytest.raises(LeagueConfigError, match="missing"):
            load_league("missing", tmp_path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "auction.toml").write_text("[leagues.main\n")
        with pytest.raises(LeagueConfigError, match="not valid TOML"):
            load_league("main", tmp_path)


class TestListLeagues:
    def test_lists_sorted(self, tmp_path: Path) -> None:
        (tmp_path / "auction.toml").write_text(_FULL_TOML)
        assert list_leagues(tmp_path) == ["main", "side"]

    def test_no_file(self, tmp_path: Path) -> None:
        assert list_leagues(tmp_path) == []
