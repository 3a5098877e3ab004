"""Stroke play totals with gross and net leaderboards."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from .common import has_handicap, ordered_holes, round_half_up
from .models import (
    GrossLeaderboardEntry,
    Hole,
    NetLeaderboardEntry,
    Player,
    StrokePlayResult,
    StrokePlaySettings,
    StrokeTotals,
    coerce_holes,
    coerce_players,
    coerce_settings,
)
from .scores import ScoreTable, hole_score, normalize_scores

HOLES_PER_ROUND = 18


def calculate_stroke_play(
    score_table: ScoreTable,
    players: Iterable[Player | Mapping[str, Any]],
    holes: Iterable[Hole | Mapping[str, Any]],
    settings: StrokePlaySettings | Mapping[str, Any] | None = None,
) -> StrokePlayResult:
    resolved = coerce_settings(StrokePlaySettings, settings)
    roster = coerce_players(players)
    scores = normalize_scores(score_table)
    card = ordered_holes(coerce_holes(holes))

    totals: dict[str, StrokeTotals] = {}
    for player in roster:
        gross = par_played = played = 0
        for hole in card:
            score = hole_score(scores, player.id, hole.hole_number)
            if score is None:
                continue
            gross += score
            par_played += hole.par
            played += 1

        # Handicap is prorated over the holes actually played.
        strokes = 0
        if resolved.use_handicaps and has_handicap(player):
            strokes = round_half_up(player.handicap * played / HOLES_PER_ROUND)

        totals[player.id] = StrokeTotals(
            gross=gross,
            net=gross - strokes,
            to_par=gross - par_played,
            holes_played=played,
            handicap_strokes=strokes,
        )

    by_gross = sorted(roster, key=lambda player: totals[player.id].gross)
    by_net = sorted(roster, key=lambda player: totals[player.id].net)

    return StrokePlayResult(
        player_totals=totals,
        leaderboard=[
            GrossLeaderboardEntry(
                player_id=player.id,
                player_name=player.name,
                gross=totals[player.id].gross,
                to_par=totals[player.id].to_par,
                holes_played=totals[player.id].holes_played,
            )
            for player in by_gross
        ],
        net_leaderboard=[
            NetLeaderboardEntry(
                player_id=player.id,
                player_name=player.name,
                net=totals[player.id].net,
                handicap_strokes=totals[player.id].handicap_strokes,
            )
            for player in by_net
        ],
    )


__all__ = ["calculate_stroke_play"]
