"""Plain-text export of a game's standings and scorecard for sharing."""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from .common import ordered_holes, player_names, plural
from .models import (
    GameConfig,
    GameError,
    GameResult,
    Hole,
    MatchPlayResult,
    NassauResult,
    SkinsResult,
    StablefordResult,
    StrokePlayResult,
)
from .scores import ScoreTable, hole_score, normalize_scores


def _money(value: float) -> str:
    return f"${value:g}"


def format_to_par(value: int) -> str:
    if value == 0:
        return "E"
    return f"+{value}" if value > 0 else str(value)


def _standings(config: GameConfig, result: GameResult) -> List[str]:
    names = player_names(config.players)
    lines: List[str] = []

    if isinstance(result, GameError):
        lines.append(result.error)
    elif isinstance(result, SkinsResult):
        for player in config.players:
            won = result.skins_won.get(player.id, 0)
            value = result.winnings.get(player.id, 0.0)
            lines.append(f"{player.name}: {plural(won, 'skin')} ({_money(value)})")
        lines.append("")
        lines.append(f"Carried skins: {result.total_carried}")
    elif isinstance(result, NassauResult):
        lines.append(f"Front 9: {result.front.status}")
        lines.append(f"Back 9: {result.back.status}")
        lines.append(f"Overall: {result.overall.status}")
    elif isinstance(result, StablefordResult):
        for position, entry in enumerate(result.leaderboard, start=1):
            lines.append(f"{position}. {entry.player_name}: {entry.points} points")
    elif isinstance(result, MatchPlayResult):
        lines.append(result.status)
        if result.winner:
            lines.append(f"Winner: {names.get(result.winner, 'Unknown')}")
    elif isinstance(result, StrokePlayResult):
        for position, entry in enumerate(result.leaderboard, start=1):
            lines.append(
                f"{position}. {entry.player_name}: {entry.gross} ({format_to_par(entry.to_par)})"
            )
    return lines


def render_game_report(
    config: GameConfig,
    holes: List[Hole],
    score_table: ScoreTable,
    result: GameResult,
    *,
    played_on: Optional[date] = None,
) -> str:
    """Render standings followed by every posted score, hole by hole."""

    scores = normalize_scores(score_table)
    day = played_on or date.today()

    lines = [f"{config.name} Game Results".strip(), day.isoformat(), ""]
    lines += ["STANDINGS", "---------"]
    lines += _standings(config, result)
    lines += ["", "", "HOLE-BY-HOLE SCORES", "-----------------"]

    for hole in ordered_holes(holes):
        lines.append("")
        lines.append(f"Hole {hole.hole_number} (Par {hole.par}):")
        for player in config.players:
            score = hole_score(scores, player.id, hole.hole_number)
            if score is None:
                continue
            diff = score - hole.par
            suffix = "" if diff == 0 else f" ({format_to_par(diff)})"
            lines.append(f"  {player.name}: {score}{suffix}")

    return "\n".join(lines) + "\n"


__all__ = ["render_game_report", "format_to_par"]
