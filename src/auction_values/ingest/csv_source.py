import csv
import logging
import math
import re
from pathlib import Path

from auction_values.domain.draft import DraftPick
from auction_values.domain.projection import PlayerProjection

logger = logging.getLogger(__name__)

_NAME_COLUMNS = ("name", "player", "playername")
_TEAM_COLUMNS = ("team", "tm")
_POSITION_COLUMNS = ("positions", "position", "pos", "eligibility")
_ID_COLUMNS = ("player_id", "id", "mlbamid", "playerid")
_POSITION_SEPARATORS = re.compile(r"[/,|;\s]+")
_TRUE_VALUES = frozenset({"1", "true", "yes", "y", "x"})


class ProjectionFileError(Exception):
    """Raised when a projection or draft-pick file cannot be read."""


def _normalize_headers(reader: csv.DictReader) -> list[dict[str, str]]:
    """Read all rows keyed by stripped, lower-cased header."""
    if reader.fieldnames is None:
        return []
    lower_map = {name: name.strip().lower() for name in reader.fieldnames}
    return [{lower_map[k]: (v or "").strip() for k, v in row.items() if k in lower_map} for row in reader]


def _first(row: dict[str, str], columns: tuple[str, ...]) -> str | None:
    for col in columns:
        if row.get(col):
            return row[col]
    return None


def _read_rows(path: Path) -> tuple[list[str], list[dict[str, str]]]:
    try:
        with open(path, newline="", encoding="utf-8-sig") as f:
            reader = csv.DictReader(f)
            rows = _normalize_headers(reader)
            headers = [h.strip() for h in reader.fieldnames or []]
    except OSError as e:
        raise ProjectionFileError(f"Cannot read {path}: {e}") from e
    except (UnicodeDecodeError, csv.Error) as e:
        raise ProjectionFileError(f"{path} is not a readable UTF-8 CSV file: {e}") from e
    return headers, rows


def _parse_number(raw: str) -> float | None:
    try:
        value = float(raw.replace(",", ""))
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def load_projections(path: Path) -> list[PlayerProjection]:
    """Read player projections from a CSV file.

    Requires a name column; every other numeric column becomes a stat keyed by
    its upper-cased header.
    """
    headers, rows = _read_rows(path)
    reserved = set(_NAME_COLUMNS + _TEAM_COLUMNS + _POSITION_COLUMNS + _ID_COLUMNS)
    if not any(h.lower() in _NAME_COLUMNS for h in headers):
        raise ProjectionFileError(f"{path}: no name column (expected one of {', '.join(_NAME_COLUMNS)})")
    stat_columns = {h.lower(): h.upper() for h in headers if h.lower() not in reserved}

    projections: list[PlayerProjection] = []
    for line, row in enumerate(rows, start=2):
        name = _first(row, _NAME_COLUMNS)
        if name is None:
            logger.warning("%s:%d: skipping row without a player name", path.name, line)
            continue
        stats: dict[str, float] = {}
        for column, stat in stat_columns.items():
            value = _parse_number(row.get(column, ""))
            if value is not None:
                stats[stat] = value
        raw_positions = _first(row, _POSITION_COLUMNS) or ""
        projections.append(
            PlayerProjection(
                name=name,
                team=_first(row, _TEAM_COLUMNS),
                positions=frozenset(p for p in _POSITION_SEPARATORS.split(raw_positions) if p),
                stats=stats,
                player_id=_first(row, _ID_COLUMNS),
            )
        )
    logger.info("Loaded %d projections from %s", len(projections), path)
    return projections


def load_picks(path: Path) -> list[DraftPick]:
    """Read confirmed draft picks (player_id, price, drafted_by, is_my_bid, pick)."""
    _, rows = _read_rows(path)
    picks: list[DraftPick] = []
    for line, row in enumerate(rows, start=2):
        player_id = row.get("player_id")
        price = _parse_number(row.get("price", ""))
        if not player_id or price is None:
            raise ProjectionFileError(f"{path.name}:{line}: picks need player_id and a numeric price")
        pick_number = _parse_number(row.get("pick", ""))
        picks.append(
            DraftPick(
                player_id=player_id,
                price=int(price),
                pick_number=int(pick_number) if pick_number is not None else len(picks) + 1,
                is_my_bid=row.get("is_my_bid", "").lower() in _TRUE_VALUES,
                drafted_by=row.get("drafted_by") or None,
            )
        )
    return picks
