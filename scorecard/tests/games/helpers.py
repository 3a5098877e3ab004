from __future__ import annotations

from typing import Dict, List

from scorecard.games.models import Hole


def build_card(count: int = 18, par: int = 4) -> List[Hole]:
    return [Hole(hole_number=number, par=par) for number in range(1, count + 1)]


def every_hole(strokes: int, holes: int = 18) -> Dict[int, int]:
    return {number: strokes for number in range(1, holes + 1)}


def round_totalling(total: int, holes: int = 18) -> Dict[int, int]:
    """Spread ``total`` strokes over ``holes`` holes as evenly as possible."""

    base, extra = divmod(total, holes)
    return {number: base + (1 if number <= extra else 0) for number in range(1, holes + 1)}
