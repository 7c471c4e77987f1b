from __future__ import annotations

import json
import pathlib
from typing import Any, Callable, List, Optional

import typer

from .config import get_settings
from .core.dates import yesterday_iso_in_timezone
from .core.models import LeaderboardRow
from .core.normalize import normalize_aggregate_payload, normalize_today_payload
from .core.scoring import to_number
from .fetch.api import (
    FetchError,
    api_fetch,
    fetch_results_for_date,
    fetch_today_standings,
    load_payload_file,
)
from .logs import configure_logging


app = typer.Typer(add_completion=False, help="Score and rank the Beat the Bots daily puzzle leaderboard")

OUT_FORMATS = {"txt", "md", "json"}


@app.callback()
def main(log_level: Optional[str] = typer.Option(None, "--log-level", help="override LOG_LEVEL")):
    configure_logging(log_level)


def _check_out(out: str) -> str:
    out = out.lower().strip()
    if out not in OUT_FORMATS:
        typer.echo("--out must be 'txt', 'md' or 'json'", err=True)
        raise typer.Exit(2)
    return out


def _load(file: Optional[pathlib.Path], fetch: Callable[[], Any]) -> Any:
    try:
        if file is not None:
            return load_payload_file(file)
        return fetch()
    except FetchError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1)
    except (OSError, ValueError) as exc:
        typer.echo(f"Could not read {file}: {exc}", err=True)
        raise typer.Exit(1)


def _leaderboard_row(standing: Any) -> LeaderboardRow:
    if not isinstance(standing, dict):
        standing = {}
    rank = to_number(standing.get("rank"))
    name = standing.get("model_name") or standing.get("model_id") or "?"
    return LeaderboardRow(
        rank=int(rank) if rank is not None else None,
        name=str(name),
        provider=standing.get("provider"),
        games_played=to_number(standing.get("games_played")) or 0,
        total_points=to_number(standing.get("total_points")) or 0,
        avg_points=to_number(standing.get("avg_points")) or 0.0,
    )


def _fmt(n: float) -> str:
    return f"{n:g}"


def _echo_leaderboard(payload: Any, out: str) -> None:
    if out == "json":
        typer.echo(json.dumps(payload, indent=2))
        return
    standings = payload.get("standings") if isinstance(payload, dict) else None
    if not isinstance(standings, list):
        typer.echo("No standings in payload", err=True)
        raise typer.Exit(1)

    rows: List[LeaderboardRow] = [_leaderboard_row(s) for s in standings]
    if out == "md":
        typer.echo("| Rank | Model | Provider | Avg Pts | Total | Games |")
        typer.echo("| ---: | --- | --- | ---: | ---: | ---: |")
        for r in rows:
            typer.echo(
                f"| {r.rank if r.rank is not None else '-'} | {r.name} | {r.provider or ''} "
                f"| {r.avg_points:.2f} | {_fmt(r.total_points)} | {_fmt(r.games_played)} |"
            )
        return
    for r in rows:
        typer.echo(
            f"{r.rank if r.rank is not None else '-'}. {r.name}  "
            f"{r.avg_points:.2f} avg ({_fmt(r.total_points)} pts / {_fmt(r.games_played)} games)"
        )


@app.command("today")
def today(
    file: Optional[pathlib.Path] = typer.Option(None, "--file", help="read a saved payload instead of the API"),
    out: str = typer.Option("txt", "--out", help="txt|md|json"),
):
    """Show today's leaderboard, rescored from per-game results."""
    out = _check_out(out)
    payload = _load(file, fetch_today_standings)
    _echo_leaderboard(normalize_today_payload(payload), out)


@app.command("day")
def day(
    date: Optional[str] = typer.Argument(None, help="YYYY-MM-DD; defaults to yesterday in BTB_TIMEZONE"),
    file: Optional[pathlib.Path] = typer.Option(None, "--file", help="read a saved payload instead of the API"),
    out: str = typer.Option("txt", "--out", help="txt|md|json"),
):
    """Show the leaderboard for a single day."""
    out = _check_out(out)
    if date is None:
        try:
            date = yesterday_iso_in_timezone(None, get_settings().BTB_TIMEZONE)
        except ValueError as exc:
            typer.echo(str(exc), err=True)
            raise typer.Exit(2)
    payload = _load(file, lambda: fetch_results_for_date(date))
    _echo_leaderboard(normalize_today_payload(payload), out)


@app.command("aggregate")
def aggregate(
    path: Optional[str] = typer.Option(None, "--path", help="API path of a multi-day standings payload"),
    file: Optional[pathlib.Path] = typer.Option(None, "--file", help="read a saved payload instead of the API"),
    out: str = typer.Option("txt", "--out", help="txt|md|json"),
):
    """Show a multi-day leaderboard, reranked from pre-summed totals."""
    out = _check_out(out)
    if path is None and file is None:
        typer.echo("one of --path or --file is required", err=True)
        raise typer.Exit(2)
    payload = _load(file, lambda: api_fetch(path))
    _echo_leaderboard(normalize_aggregate_payload(payload), out)


if __name__ == "__main__":
    app()
