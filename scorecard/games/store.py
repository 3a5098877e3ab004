"""Process-local store for side games attached to a round."""

from __future__ import annotations

import logging
import time
import uuid
from threading import Lock
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from scorecard.metrics.games import observe_calculation
from scorecard.telemetry import games as telemetry

from . import events
from .engine import GameState, ScoreEntered, initial_state, reduce_game
from .models import (
    GameConfig,
    GameError,
    GameResult,
    Hole,
    MatchPlayResult,
    NassauResult,
)

logger = logging.getLogger(__name__)

GameStatus = Literal["active", "completed"]


class GameNotFound(Exception):
    pass


class GameCompleted(Exception):
    pass


class Game(BaseModel):
    id: str
    round_id: str = Field(serialization_alias="roundId")
    status: GameStatus = "active"
    created_ts: float = Field(serialization_alias="createdTs")
    completed_ts: Optional[float] = Field(default=None, serialization_alias="completedTs")
    config: GameConfig
    holes: List[Hole]
    scores: Dict[str, Dict[int, int]] = Field(default_factory=dict)
    result: GameResult

    model_config = ConfigDict(populate_by_name=True)

    def state(self) -> GameState:
        return GameState(
            config=self.config, holes=self.holes, scores=self.scores, result=self.result
        )


_GAMES: Dict[str, Game] = {}
_LOCK = Lock()


def new_game_id() -> str:
    """Generate a new game identifier."""

    return f"game_{uuid.uuid4().hex[:12]}"


def _observe(state: GameState, started: float) -> None:
    outcome = "error" if isinstance(state.result, GameError) else "ok"
    observe_calculation(
        state.config.format.value, outcome, (time.perf_counter() - started) * 1000.0
    )


def _winner(result: GameResult) -> Optional[str]:
    if isinstance(result, MatchPlayResult):
        return result.winner
    if isinstance(result, NassauResult):
        return result.overall.winner
    return None


def _snapshot(game: Game) -> dict:
    return game.model_dump(mode="json", by_alias=True)


def create_game(
    round_id: str, config: GameConfig, holes: List[Hole]
) -> tuple[Game, bool]:
    """Create a game for ``round_id``; returns ``(game, created)``.

    A round has at most one active game, which is returned as-is when one
    already exists.
    """

    with _LOCK:
        for existing in _GAMES.values():
            if existing.round_id == round_id and existing.status == "active":
                logger.info("round %s already has active game %s", round_id, existing.id)
                return existing, False

        started = time.perf_counter()
        state = initial_state(config, holes)
        _observe(state, started)
        game = Game(
            id=new_game_id(),
            round_id=round_id,
            created_ts=time.time(),
            config=state.config,
            holes=state.holes,
            scores=state.scores,
            result=state.result,
        )
        _GAMES[game.id] = game

    logger.info("created %s game %s for round %s", config.format.value, game.id, round_id)
    telemetry.record_game_created(game.id, round_id, config.format.value)
    return game, True


def get_game(game_id: str) -> Game:
    with _LOCK:
        game = _GAMES.get(game_id)
    if game is None:
        raise GameNotFound(game_id)
    return game


def list_games_for_round(round_id: str) -> List[Game]:
    with _LOCK:
        games = [g for g in _GAMES.values() if g.round_id == round_id]
    return sorted(games, key=lambda g: g.created_ts, reverse=True)


def game_history() -> List[Game]:
    with _LOCK:
        games = [g for g in _GAMES.values() if g.status == "completed"]
    return sorted(games, key=lambda g: g.completed_ts or 0.0, reverse=True)


def record_score(
    game_id: str, player_id: str, hole_number: int, strokes: Optional[int]
) -> Game:
    """Post (or clear, with ``strokes=None``) one score and recompute."""

    started = time.perf_counter()
    with _LOCK:
        game = _GAMES.get(game_id)
        if game is None:
            raise GameNotFound(game_id)
        if game.status != "active":
            raise GameCompleted(game_id)
        if player_id not in {player.id for player in game.config.players}:
            raise ValueError(f"invalid score entry for hole={hole_number} player={player_id}")
        if hole_number not in {hole.hole_number for hole in game.holes}:
            raise ValueError(f"invalid score entry for hole={hole_number} player={player_id}")

        state = reduce_game(
            game.state(),
            ScoreEntered(player_id=player_id, hole_number=hole_number, strokes=strokes),
        )
        _observe(state, started)
        updated = game.model_copy(update={"scores": state.scores, "result": state.result})
        _GAMES[game_id] = updated

    telemetry.record_score_write(
        game_id, hole_number, (time.perf_counter() - started) * 1000.0, status="ok"
    )
    events.publish(game_id, _snapshot(updated))
    return updated


def complete_game(game_id: str) -> Game:
    with _LOCK:
        game = _GAMES.get(game_id)
        if game is None:
            raise GameNotFound(game_id)
        if game.status == "completed":
            return game
        updated = game.model_copy(
            update={"status": "completed", "completed_ts": time.time()}
        )
        _GAMES[game_id] = updated

    logger.info("completed game %s", game_id)
    telemetry.record_game_completed(game_id, winner=_winner(updated.result))
    events.publish(game_id, _snapshot(updated))
    return updated


def _reset_state() -> None:
    with _LOCK:
        _GAMES.clear()


__all__ = [
    "Game",
    "GameNotFound",
    "GameCompleted",
    "new_game_id",
    "create_game",
    "get_game",
    "list_games_for_round",
    "game_history",
    "record_score",
    "complete_game",
]
