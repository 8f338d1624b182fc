from rich.console import Console
from rich.table import Table

from auction_values.domain.draft import DraftSummary, PositionNeed
from auction_values.domain.valuation import PlayerValue, RecommendedSplit
from auction_values.scoring_presets import ScoringPreset

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def _status(value: PlayerValue) -> str:
    if value.is_drafted:
        price = f"${value.draft_price}" if value.draft_price is not None else ""
        return f"drafted {price} {value.drafted_by or ''}".strip()
    if value.has_pending_bid:
        return "bidding (mine)" if value.is_my_bid else "bidding"
    return ""


def print_player_values(values: list[PlayerValue], *, live: bool = False, top: int | None = None) -> None:
    """Print the valuation board, with live values and draft status when ``live``."""
    if not values:
        console.print("No player values.")
        return
    rows = values[:top] if top is not None else values
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Rank", justify="right")
    table.add_column("Player")
    table.add_column("Type")
    table.add_column("Pos")
    table.add_column("Value", justify="right")
    if live:
        table.add_column("Live", justify="right")
    table.add_column("VAR", justify="right")
    table.add_column("Tier", justify="right")
    table.add_column("Class")
    if live:
        table.add_column("Status")
    for v in rows:
        row = [
            str(v.rank),
            v.name if v.team is None else f"{v.name} [dim]{v.team}[/dim]",
            v.player_type,
            v.assigned_position or "/".join(v.positions),
            f"${v.original_value}",
        ]
        if live:
            row.append(f"${v.adjusted_value}" if v.adjusted_value is not None else "")
        row += [f"{v.var:.2f}", str(v.tier), v.value_tier or ""]
        if live:
            row.append(_status(v))
        table.add_row(*row)
    console.print(table)


def print_draft_summary(summary: DraftSummary) -> None:
    direction = "premium" if summary.inflation_rate > 0 else "discount" if summary.inflation_rate < 0 else "neutral"
    console.print(
        f"Spent [bold]${summary.total_spent}[/bold] of ${summary.total_budget}"
        f"  Remaining: [bold]${summary.remaining_budget}[/bold]"
        f"  Drafted: {summary.players_drafted}"
    )
    console.print(
        f"  Mine: ${summary.my_spent} on {summary.my_players_drafted} players"
        f" (${summary.my_remaining_budget} left)"
    )
    console.print(f"  Inflation: [bold]{summary.inflation_rate * 100:+.1f}%[/bold] ({direction})")


def print_position_needs(needs: list[PositionNeed]) -> None:
    if not needs:
        return
    open_spots = sum(n.remaining for n in needs)
    summary = ", ".join(f"{n.position} {n.filled}/{n.required}" for n in needs)
    console.print(f"  Roster: {summary}")
    console.print(f"  Open spots: {open_spots} (${needs[0].budget_per_spot}/spot)")


def print_recommended_split(split: RecommendedSplit) -> None:
    console.print(
        f"Recommended split: [bold]{split.hitter_percent}/{100 - split.hitter_percent}[/bold] (hitters/pitchers)"
    )
    console.print(f"  {split.reason}")


def print_presets(presets: tuple[ScoringPreset, ...] | list[ScoringPreset]) -> None:
    table = Table(show_edge=False, pad_edge=False)
    table.add_column("ID", no_wrap=True)
    table.add_column("Name")
    table.add_column("Platform")
    table.add_column("Format")
    for preset in presets:
        table.add_row(preset.id, preset.name, preset.platform, preset.scoring.style)
    console.print(table)


def print_leagues(names: list[str]) -> None:
    if not names:
        console.print("No leagues configured.")
        return
    for name in names:
        console.print(name)
