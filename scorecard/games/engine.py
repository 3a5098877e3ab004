"""Format dispatch and the score-entry reducer.

The scorecard never patches a result in place. Each score change produces a
new :class:`GameState` whose result is recomputed from the whole table.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from .match_play import calculate_match_play
from .models import GameConfig, GameFormat, GameResult, Hole, coerce_holes
from .nassau import calculate_nassau
from .scores import ScoreTable, normalize_scores, parse_strokes
from .skins import calculate_skins
from .stableford import calculate_stableford
from .stroke_play import calculate_stroke_play

Calculator = Callable[..., GameResult]

CALCULATORS: Dict[GameFormat, Calculator] = {
    GameFormat.SKINS: calculate_skins,
    GameFormat.NASSAU: calculate_nassau,
    GameFormat.STABLEFORD: calculate_stableford,
    GameFormat.MATCH: calculate_match_play,
    GameFormat.STROKE: calculate_stroke_play,
}


def calculate_game(
    config: GameConfig | Mapping[str, Any],
    score_table: ScoreTable,
    holes: List[Hole] | List[Mapping[str, Any]],
) -> GameResult:
    """Compute the standings for ``config`` from the full score table."""

    if not isinstance(config, GameConfig):
        config = GameConfig.model_validate(config)
    calculator = CALCULATORS[config.format]
    return calculator(score_table, config.players, holes, config.resolved_settings())


class ScoreEntered(BaseModel):
    """A player's strokes on one hole; ``strokes=None`` clears the entry."""

    player_id: str = Field(
        validation_alias=AliasChoices("player_id", "playerId"),
        serialization_alias="playerId",
    )
    hole_number: int = Field(
        ge=1,
        validation_alias=AliasChoices("hole_number", "holeNumber"),
        serialization_alias="holeNumber",
    )
    strokes: Optional[int] = None

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)


class GameState(BaseModel):
    config: GameConfig
    holes: List[Hole]
    scores: Dict[str, Dict[int, int]] = Field(default_factory=dict)
    result: GameResult

    model_config = ConfigDict(frozen=True)


def initial_state(
    config: GameConfig | Mapping[str, Any],
    holes: List[Hole] | List[Mapping[str, Any]],
    scores: ScoreTable | None = None,
) -> GameState:
    if not isinstance(config, GameConfig):
        config = GameConfig.model_validate(config)
    card = coerce_holes(holes)
    table = normalize_scores(scores)
    for player in config.players:
        table.setdefault(player.id, {})
    return GameState(
        config=config,
        holes=card,
        scores=table,
        result=calculate_game(config, table, card),
    )


def reduce_game(state: GameState, action: ScoreEntered) -> GameState:
    """Apply one score entry and recompute the result from scratch."""

    scores = {player_id: dict(holes) for player_id, holes in state.scores.items()}
    player_scores = scores.setdefault(action.player_id, {})
    strokes = parse_strokes(action.strokes)
    if strokes is None:
        player_scores.pop(action.hole_number, None)
    else:
        player_scores[action.hole_number] = strokes

    return GameState(
        config=state.config,
        holes=state.holes,
        scores=scores,
        result=calculate_game(state.config, scores, state.holes),
    )


__all__ = [
    "CALCULATORS",
    "calculate_game",
    "ScoreEntered",
    "GameState",
    "initial_state",
    "reduce_game",
]
