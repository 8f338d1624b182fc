from pathlib import Path

import pytest

from auction_values.ingest.csv_source import ProjectionFileError, load_picks, load_projections


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadProjections:
    def test_basic_rows(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "proj.csv",
            "Name,Team,Pos,PlayerId,HR,AVG,AB\n"
            "Juan Soto,NYM,LF/RF,665742,35,.285,560\n"
            "Gerrit Cole,NYY,SP,543037,,,\n",
        )
        projections = load_projections(path)
        assert len(projections) == 2
        soto = projections[0]
        assert soto.name == "Juan Soto"
        assert soto.team == "NYM"
        assert soto.positions == frozenset({"LF", "RF"})
        assert soto.player_id == "665742"
        assert soto.stats == {"HR": 35.0, "AVG": pytest.approx(0.285), "AB": 560.0}
        assert projections[1].stats == {}

    def test_headers_case_insensitive(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "proj.csv", " player ,POSITIONS,so\nShohei Ohtani,SP DH,180\n")
        projections = load_projections(path)
        assert projections[0].name == "Shohei Ohtani"
        assert projections[0].positions == frozenset({"SP", "DH"})
        assert projections[0].stats == {"SO": 180.0}

    def test_non_numeric_values_skipped(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "proj.csv", "Name,HR,Notes\nA,n/a,hurt\n")
        assert load_projections(path)[0].stats == {}

    def test_thousands_separator(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "proj.csv", 'Name,PA\nA,"1,002"\n')
        assert load_projections(path)[0].stats == {"PA": 1002.0}

    def test_row_without_name_skipped(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "proj.csv", "Name,HR\n,10\nB,20\n")
        assert [p.name for p in load_projections(path)] == ["B"]

    def test_missing_name_column(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "proj.csv", "Team,HR\nNYM,10\n")
        with pytest.raises(ProjectionFileError, match="no name column"):
            load_projections(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ProjectionFileError, match="Cannot read"):
            load_projections(tmp_path / "absent.csv")

    def test_invalid_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "proj.csv"
        path.write_bytes(b"\xff\xfeName,HR\nA,10\n")
        with pytest.raises(ProjectionFileError, match="not a readable UTF-8 CSV"):
            load_projections(path)


class TestLoadPicks:
    def test_basic_picks(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "picks.csv",
            "player_id,price,drafted_by,is_my_bid\nh1,45,Team 3,\nh2,12,,yes\n",
        )
        picks = load_picks(path)
        assert [(p.player_id, p.price, p.pick_number) for p in picks] == [("h1", 45, 1), ("h2", 12, 2)]
        assert picks[0].drafted_by == "Team 3"
        assert not picks[0].is_my_bid
        assert picks[1].is_my_bid
        assert picks[1].drafted_by is None

    def test_explicit_pick_number(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "picks.csv", "pick,player_id,price\n7,h1,3\n")
        assert load_picks(path)[0].pick_number == 7

    def test_invalid_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "picks.csv"
        path.write_bytes(b"player_id,price\n\xff\xfe,10\n")
        with pytest.raises(ProjectionFileError, match="picks.csv"):
            load_picks(path)

    def test_missing_price(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "picks.csv", "player_id,price\nh1,\n")
        with pytest.raises(ProjectionFileError, match="picks.csv:2"):
            load_picks(path)
