from auction_values.domain.draft import DraftPick
from auction_values.domain.league_settings import LeagueSettings
from auction_values.domain.scoring import PlayerType
from auction_values.domain.valuation import PlayerValue
from auction_values.services.draft_tracker import position_needs, summarize_draft


class TestSummarizeDraft:
    def test_totals(self) -> None:
        league = LeagueSettings(teams=12, budget=260, roster_spots=23)
        picks = [
            DraftPick(player_id="a", price=50, pick_number=1, is_my_bid=True),
            DraftPick(player_id="b", price=30, pick_number=2, drafted_by="Team 2"),
            DraftPick(player_id="c", price=12, pick_number=3, is_my_bid=True),
        ]
        summary = summarize_draft(picks, league, inflation_rate=0.02)
        assert summary.total_budget == 3120
        assert summary.total_spent == 92
        assert summary.remaining_budget == 3028
        assert summary.players_drafted == 3
        assert summary.my_spent == 62
        assert summary.my_players_drafted == 2
        assert summary.my_remaining_budget == 198
        assert summary.inflation_rate == 0.02

    def test_no_picks(self) -> None:
        summary = summarize_draft([], LeagueSettings(teams=10, budget=200, roster_spots=23))
        assert summary.remaining_budget == 2000
        assert summary.my_remaining_budget == 200
        assert summary.inflation_rate == 0.0


def _value(player_id: str, *positions: str) -> PlayerValue:
    return PlayerValue(
        id=player_id,
        name=player_id,
        positions=positions,
        original_value=10,
        rank=1,
        tier=1,
        player_type=PlayerType.PITCHER if positions[0] in ("SP", "RP") else PlayerType.HITTER,
    )


class TestPositionNeeds:
    _LEAGUE = LeagueSettings(
        teams=12,
        budget=260,
        roster_spots=9,
        positions={"C": 1, "2B": 1, "SS": 1, "OF": 2, "MI": 1, "UTIL": 1, "SP": 2, "BENCH": 2},
    )

    def test_only_my_picks_count(self) -> None:
        values = [_value("c", "C"), _value("of", "OF")]
        picks = [
            DraftPick(player_id="c", price=20, pick_number=1, is_my_bid=True),
            DraftPick(player_id="of", price=30, pick_number=2),
        ]
        needs = {n.position: n for n in position_needs(values, picks, self._LEAGUE)}
        assert needs["C"].filled == 1
        assert needs["C"].remaining == 0
        assert needs["OF"].filled == 0
        assert list(needs) == ["C", "2B", "SS", "OF", "MI", "UTIL", "SP"]

    def test_flex_slots_take_overflow(self) -> None:
        values = [_value("ss1", "SS"), _value("ss2", "SS"), _value("ss3", "SS")]
        picks = [DraftPick(player_id=v.id, price=10, pick_number=i, is_my_bid=True) for i, v in enumerate(values, 1)]
        needs = {n.position: n for n in position_needs(values, picks, self._LEAGUE)}
        assert needs["SS"].filled == 1
        assert needs["MI"].filled == 1
        assert needs["UTIL"].filled == 1

    def test_multi_position_player_takes_roomiest_primary(self) -> None:
        values = [_value("ss", "SS"), _value("mid", "2B", "SS")]
        picks = [DraftPick(player_id=v.id, price=5, pick_number=i, is_my_bid=True) for i, v in enumerate(values, 1)]
        needs = {n.position: n for n in position_needs(values, picks, self._LEAGUE)}
        assert needs["SS"].filled == 1
        assert needs["2B"].filled == 1
        assert needs["MI"].filled == 0

    def test_budget_per_open_spot(self) -> None:
        values = [_value("sp", "SP")]
        picks = [DraftPick(player_id="sp", price=40, pick_number=1, is_my_bid=True)]
        needs = position_needs(values, picks, self._LEAGUE)
        # 9 starting slots, one filled: $220 over 8 open spots.
        assert sum(n.remaining for n in needs) == 8
        assert all(n.budget_per_spot == 28 for n in needs)

    def test_no_picks(self) -> None:
        needs = position_needs([], [], self._LEAGUE)
        assert sum(n.filled for n in needs) == 0
        assert all(n.budget_per_spot == round(260 / 9) for n in needs)
