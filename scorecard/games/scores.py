"""Score table normalisation.

Callers hand the engine whatever the scorecard holds: ints, blanks, ``None``
or decimal strings keyed by int or string hole numbers. Everything passes
through :func:`parse_strokes` so the calculators only ever see
``HoleScore`` values, where ``None`` means the hole has not been played.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

HoleScore = Optional[int]
ScoreTable = Mapping[str, Mapping[Any, Any]]
NormalizedScores = Dict[str, Dict[int, int]]


def parse_strokes(value: Any) -> HoleScore:
    """Return the stroke count for a played hole or ``None`` when unplayed."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value.isdecimal():
            return None
        value = int(value)
    if isinstance(value, float):
        if value != value or not value.is_integer():
            return None
        value = int(value)
    if not isinstance(value, int) or value <= 0:
        return None
    return value


def parse_hole_number(key: Any) -> Optional[int]:
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key if key > 0 else None
    if isinstance(key, str) and key.strip().isdecimal():
        number = int(key.strip())
        return number if number > 0 else None
    return None


def normalize_scores(score_table: ScoreTable | None) -> NormalizedScores:
    """Copy ``score_table`` keeping only played holes.

    The input is never modified; the returned mapping shares no containers
    with it.
    """

    normalized: NormalizedScores = {}
    if not score_table:
        return normalized
    for player_id, holes in score_table.items():
        played: Dict[int, int] = {}
        for key, raw in (holes or {}).items():
            hole_number = parse_hole_number(key)
            strokes = parse_strokes(raw)
            if hole_number is None or strokes is None:
                continue
            played[hole_number] = strokes
        normalized[str(player_id)] = played
    return normalized


def hole_score(scores: NormalizedScores, player_id: str, hole_number: int) -> HoleScore:
    return scores.get(player_id, {}).get(hole_number)


__all__ = [
    "HoleScore",
    "ScoreTable",
    "NormalizedScores",
    "parse_strokes",
    "parse_hole_number",
    "normalize_scores",
    "hole_score",
]
