"""Head-to-head match play with simplified handicap strokes."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional

from .common import HALVED, format_match_status, ordered_holes, round_half_up
from .models import (
    GameError,
    Hole,
    MatchPlayResult,
    MatchPlaySettings,
    Player,
    coerce_holes,
    coerce_players,
    coerce_settings,
)
from .scores import ScoreTable, hole_score, normalize_scores

logger = logging.getLogger(__name__)

MATCH_LENGTH = 18


def _stroke_allowance(
    player1: Player, player2: Player, use_handicaps: bool
) -> tuple[int, Optional[str]]:
    if not use_handicaps:
        return 0, None
    handicap1 = player1.handicap or 0.0
    handicap2 = player2.handicap or 0.0
    strokes = round_half_up(abs(handicap1 - handicap2))
    if strokes == 0:
        return 0, None
    receiver = player1.id if handicap1 > handicap2 else player2.id
    return strokes, receiver


def calculate_match_play(
    score_table: ScoreTable,
    players: Iterable[Player | Mapping[str, Any]],
    holes: Iterable[Hole | Mapping[str, Any]],
    settings: MatchPlaySettings | Mapping[str, Any] | None = None,
) -> MatchPlayResult | GameError:
    roster = coerce_players(players)
    if len(roster) != 2:
        logger.debug("match play rejected: %d players", len(roster))
        return GameError(error="Match play requires exactly 2 players")

    resolved = coerce_settings(MatchPlaySettings, settings)
    scores = normalize_scores(score_table)
    player1, player2 = roster
    card = ordered_holes(coerce_holes(holes))

    strokes, receiver = _stroke_allowance(player1, player2, resolved.use_handicaps)

    won1 = won2 = played = 0
    hole_results: dict[int, str] = {}
    closed_after: Optional[int] = None
    closed_remaining = 0

    for index, hole in enumerate(card):
        if closed_after is not None:
            break
        number = hole.hole_number
        score1 = hole_score(scores, player1.id, number)
        score2 = hole_score(scores, player2.id, number)
        if score1 is None or score2 is None:
            continue

        played += 1
        net1, net2 = score1, score2
        # Strokes go on the first holes of the card, not by stroke index.
        if index < strokes:
            if receiver == player1.id:
                net1 -= 1
            else:
                net2 -= 1

        if net1 < net2:
            won1 += 1
            hole_results[number] = player1.id
        elif net2 < net1:
            won2 += 1
            hole_results[number] = player2.id
        else:
            hole_results[number] = HALVED

        if abs(won1 - won2) > MATCH_LENGTH - played:
            closed_after = number
            closed_remaining = max(MATCH_LENGTH - number, 0)

    diff = won1 - won2
    remaining = max(MATCH_LENGTH - played, 0)
    leader = player1 if diff > 0 else player2
    lead = abs(diff)

    winner: Optional[str] = None
    if closed_after is not None:
        status = f"{leader.name} wins {lead}&{closed_remaining}"
        winner = leader.id
    else:
        # An open match always has lead <= remaining.
        status = format_match_status(leader.name, lead, remaining)

    return MatchPlayResult(
        player1_holes=won1,
        player2_holes=won2,
        hole_results=hole_results,
        status=status,
        leader=None if diff == 0 else leader.id,
        holes_played=played,
        holes_remaining=remaining,
        match_closed=closed_after is not None,
        closed_after_hole=closed_after,
        winner=winner,
        thru=played,
        handicap_strokes=strokes,
        stroke_receiver=receiver,
    )


__all__ = ["calculate_match_play"]
