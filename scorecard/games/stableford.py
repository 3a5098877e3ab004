"""Stableford: points per hole relative to net par."""

from __future__ import annotations

import math
from typing import Any, Iterable, Mapping, Optional

from .common import has_handicap, ordered_holes
from .models import (
    Hole,
    Player,
    StablefordEntry,
    StablefordResult,
    StablefordSettings,
    coerce_holes,
    coerce_players,
    coerce_settings,
)
from .scores import ScoreTable, hole_score, normalize_scores

HOLES_PER_ROUND = 18


def calculate_stableford_points(
    score: Optional[int],
    par: int,
    settings: StablefordSettings | Mapping[str, Any] | None = None,
    handicap_strokes: int = 0,
) -> int:
    """Points for one hole; an unplayed hole scores nothing."""

    resolved = coerce_settings(StablefordSettings, settings)
    if not score or score <= 0:
        return 0

    diff = (score - handicap_strokes) - par
    if diff <= -2:
        return resolved.eagle_points
    if diff == -1:
        return resolved.birdie_points
    if diff == 0:
        return resolved.par_points
    if diff == 1:
        return resolved.bogey_points
    return 0


def handicap_strokes_for_hole(handicap: float, hole_number: int) -> int:
    """Spread a handicap over the card by raw hole number.

    Every hole gets ``handicap // 18`` strokes and holes numbered up to the
    remainder get one more. The remainder keeps the sign of the handicap.
    """

    strokes = math.floor(handicap / HOLES_PER_ROUND)
    if hole_number <= math.fmod(handicap, HOLES_PER_ROUND):
        strokes += 1
    return strokes


def calculate_stableford(
    score_table: ScoreTable,
    players: Iterable[Player | Mapping[str, Any]],
    holes: Iterable[Hole | Mapping[str, Any]],
    settings: StablefordSettings | Mapping[str, Any] | None = None,
) -> StablefordResult:
    resolved = coerce_settings(StablefordSettings, settings)
    roster = coerce_players(players)
    scores = normalize_scores(score_table)

    result = StablefordResult(
        player_points={player.id: 0 for player in roster},
        holes_played={player.id: 0 for player in roster},
    )

    for hole in ordered_holes(coerce_holes(holes)):
        number = hole.hole_number
        points_by_player: dict[str, int] = {}
        for player in roster:
            score = hole_score(scores, player.id, number)
            if score is None:
                continue
            strokes = 0
            if resolved.use_handicaps and has_handicap(player):
                strokes = handicap_strokes_for_hole(player.handicap, number)
            points = calculate_stableford_points(score, hole.par, resolved, strokes)
            points_by_player[player.id] = points
            result.player_points[player.id] += points
            result.holes_played[player.id] += 1
        result.hole_points[number] = points_by_player

    ranked = sorted(roster, key=lambda player: result.player_points[player.id], reverse=True)
    result.leaderboard = [
        StablefordEntry(
            player_id=player.id,
            player_name=player.name,
            points=result.player_points[player.id],
        )
        for player in ranked
    ]
    return result


__all__ = [
    "calculate_stableford",
    "calculate_stableford_points",
    "handicap_strokes_for_hole",
]
