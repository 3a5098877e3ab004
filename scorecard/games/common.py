"""Helpers shared by the game format calculators."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, List, Mapping, Optional

from .models import Hole, Player

HALVED = "halved"


@dataclass(slots=True)
class HoleOutcome:
    winner: Optional[str]
    tied: bool
    scores: List[tuple[str, int]] = field(default_factory=list)


def ordered_holes(holes: Iterable[Hole]) -> List[Hole]:
    return sorted(holes, key=lambda hole: hole.hole_number)


def determine_hole_winner(hole_scores: Mapping[str, int]) -> HoleOutcome:
    """Return the sole lowest scorer on a hole, if there is one.

    ``scores`` is the ascending (player id, strokes) list; equal scores keep
    the order they were supplied in.
    """

    ranked = sorted(
        ((player_id, score) for player_id, score in hole_scores.items() if score and score > 0),
        key=lambda item: item[1],
    )
    if not ranked:
        return HoleOutcome(winner=None, tied=False)

    best = ranked[0][1]
    leaders = [player_id for player_id, score in ranked if score == best]
    if len(leaders) == 1:
        return HoleOutcome(winner=leaders[0], tied=False, scores=ranked)
    return HoleOutcome(winner=None, tied=True, scores=ranked)


def round_half_up(value: float) -> int:
    """Round like the mobile client does: halves go towards positive infinity."""

    return int(math.floor(value + 0.5))


def has_handicap(player: Player) -> bool:
    return bool(player.handicap)


def player_names(players: Iterable[Player]) -> dict[str, str]:
    return {player.id: player.name for player in players}


def format_match_status(name: str, lead: int, holes_remaining: int) -> str:
    """Describe a match from the leader's point of view.

    ``lead`` is the leader's hole advantage (0 for all square).
    """

    if lead == 0:
        return "All Square"
    if lead > holes_remaining:
        return f"{name} wins {lead}&{holes_remaining}"
    if lead == holes_remaining:
        return f"{name} {lead} UP (dormie)"
    return f"{name} {lead} UP"


def plural(count: int, word: str) -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


__all__ = [
    "HALVED",
    "HoleOutcome",
    "ordered_holes",
    "determine_hole_winner",
    "round_half_up",
    "has_handicap",
    "player_names",
    "format_match_status",
    "plural",
]
