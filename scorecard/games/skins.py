"""Skins: each hole pays the sole low score, ties optionally carry."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional

from .common import determine_hole_winner, ordered_holes, plural
from .models import (
    Hole,
    Player,
    SkinsResult,
    SkinsSettings,
    coerce_holes,
    coerce_players,
    coerce_settings,
)
from .scores import ScoreTable, hole_score, normalize_scores


def skins_leader(
    skins_won: Mapping[str, int], players: Iterable[Player]
) -> Optional[tuple[Player, int]]:
    """Return the player holding the most skins, first in player order on ties."""

    leader: Optional[tuple[Player, int]] = None
    for player in players:
        count = skins_won.get(player.id, 0)
        if leader is None or count > leader[1]:
            leader = (player, count)
    if leader is None or leader[1] == 0:
        return None
    return leader


def calculate_skins(
    score_table: ScoreTable,
    players: Iterable[Player | Mapping[str, Any]],
    holes: Iterable[Hole | Mapping[str, Any]],
    settings: SkinsSettings | Mapping[str, Any] | None = None,
) -> SkinsResult:
    resolved = coerce_settings(SkinsSettings, settings)
    roster = coerce_players(players)
    scores = normalize_scores(score_table)

    hole_winners: Dict[int, Optional[str]] = {}
    skins_won: Dict[str, int] = {player.id: 0 for player in roster}
    carried_holes: list[int] = []
    carried = 0

    for hole in ordered_holes(coerce_holes(holes)):
        number = hole.hole_number
        # The field for a hole is whoever has posted a score on it.
        hole_scores = {
            player.id: strokes
            for player in roster
            if (strokes := hole_score(scores, player.id, number)) is not None
        }
        if not hole_scores:
            continue

        outcome = determine_hole_winner(hole_scores)
        if outcome.winner is not None:
            hole_winners[number] = outcome.winner
            skins_won[outcome.winner] += 1 + carried
            carried = 0
        else:
            hole_winners[number] = None
            if resolved.carry_over:
                carried += 1
                carried_holes.append(number)

    status = ""
    if carried > 0:
        status = f"{plural(carried, 'skin')} carried"
    else:
        leader = skins_leader(skins_won, roster)
        if leader is not None:
            player, count = leader
            status = f"{player.name} leads with {plural(count, 'skin')}"

    return SkinsResult(
        hole_winners=hole_winners,
        skins_won=skins_won,
        carried_holes=carried_holes,
        total_carried=carried,
        current_status=status,
        skin_value=resolved.skin_value,
        winnings={pid: count * resolved.skin_value for pid, count in skins_won.items()},
    )


__all__ = ["calculate_skins", "skins_leader"]
