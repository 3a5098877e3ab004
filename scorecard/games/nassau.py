"""Nassau: front nine, back nine and overall scored as three matches."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from .common import HALVED, format_match_status, has_handicap, ordered_holes
from .models import (
    GameError,
    Hole,
    NassauResult,
    NassauSegment,
    NassauSettings,
    Player,
    coerce_holes,
    coerce_players,
    coerce_settings,
)
from .scores import ScoreTable, hole_score, normalize_scores

logger = logging.getLogger(__name__)

FRONT_NINE_LAST_HOLE = 9
SEGMENT_LENGTH = 9
OVERALL_LENGTH = 18


def _new_segment(player1: Player, player2: Player) -> NassauSegment:
    return NassauSegment(
        holes_won={player1.id: 0, player2.id: 0},
        holes_lost={player1.id: 0, player2.id: 0},
    )


def _record_hole(segment: NassauSegment, winner: str, loser: str | None) -> None:
    if loser is None:
        segment.holes_tied += 1
    else:
        segment.holes_won[winner] += 1
        segment.holes_lost[loser] += 1
    segment.thru += 1


def _settle_segment(
    segment: NassauSegment, player1: Player, player2: Player, length: int
) -> None:
    if segment.thru == 0:
        return
    diff = segment.holes_won[player1.id] - segment.holes_won[player2.id]
    remaining = length - segment.thru
    leader = player1 if diff > 0 else player2
    lead = abs(diff)
    segment.status = format_match_status(leader.name, lead, remaining)
    segment.winner = leader.id if diff != 0 and lead > remaining else None


def _net_scores(
    score1: int, score2: int, player1: Player, player2: Player, use_handicaps: bool
) -> tuple[int, int]:
    # One stroke on every hole to the higher handicap, not allocated by index.
    if not (use_handicaps and has_handicap(player1) and has_handicap(player2)):
        return score1, score2
    if player1.handicap > player2.handicap:
        return score1 - 1, score2
    if player2.handicap > player1.handicap:
        return score1, score2 - 1
    return score1, score2


def calculate_nassau(
    score_table: ScoreTable,
    players: Iterable[Player | Mapping[str, Any]],
    holes: Iterable[Hole | Mapping[str, Any]],
    settings: NassauSettings | Mapping[str, Any] | None = None,
) -> NassauResult | GameError:
    roster = coerce_players(players)
    if len(roster) < 2:
        logger.debug("nassau rejected: %d players", len(roster))
        return GameError(error="Nassau requires at least 2 players")
    if len(roster) > 2:
        logger.debug("nassau rejected: %d players", len(roster))
        return GameError(error="Nassau supports exactly 2 players")

    resolved = coerce_settings(NassauSettings, settings)
    scores = normalize_scores(score_table)
    player1, player2 = roster

    result = NassauResult(
        front=_new_segment(player1, player2),
        back=_new_segment(player1, player2),
        overall=_new_segment(player1, player2),
        front_bet=resolved.front_bet,
        back_bet=resolved.back_bet,
        overall_bet=resolved.overall_bet,
    )

    for hole in ordered_holes(coerce_holes(holes)):
        number = hole.hole_number
        score1 = hole_score(scores, player1.id, number)
        score2 = hole_score(scores, player2.id, number)
        if score1 is None or score2 is None:
            continue

        net1, net2 = _net_scores(score1, score2, player1, player2, resolved.use_handicaps)
        if net1 < net2:
            winner, loser = player1.id, player2.id
        elif net2 < net1:
            winner, loser = player2.id, player1.id
        else:
            winner, loser = HALVED, None
        result.hole_results[number] = winner

        segment = result.front if number <= FRONT_NINE_LAST_HOLE else result.back
        _record_hole(segment, winner, loser)
        _record_hole(result.overall, winner, loser)

    _settle_segment(result.front, player1, player2, SEGMENT_LENGTH)
    _settle_segment(result.back, player1, player2, SEGMENT_LENGTH)
    _settle_segment(result.overall, player1, player2, OVERALL_LENGTH)
    return result


__all__ = ["calculate_nassau"]
