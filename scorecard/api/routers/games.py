from __future__ import annotations

import asyncio
import json
import logging
import time
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import PlainTextResponse, StreamingResponse
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from scorecard.config import get_settings
from scorecard.games import events
from scorecard.games.engine import calculate_game
from scorecard.games.models import GameConfig, GameError, Hole
from scorecard.games.report import render_game_report
from scorecard.games.store import (
    Game,
    GameCompleted,
    GameNotFound,
    complete_game,
    create_game,
    game_history,
    get_game,
    list_games_for_round,
    record_score,
)
from scorecard.metrics.games import observe_calculation
from scorecard.security import require_api_key

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/games",
    tags=["games"],
    dependencies=[Depends(require_api_key)],
)


def _default_card(count: int) -> List[Hole]:
    return [Hole(hole_number=number, par=4) for number in range(1, count + 1)]


def _game_out(game: Game) -> Dict[str, Any]:
    return game.model_dump(mode="json", by_alias=True)


def _validate_card(holes: List[Hole]) -> List[Hole]:
    settings = get_settings()
    if not holes:
        raise ValueError("card has no holes")
    if len(holes) > settings.max_holes:
        raise ValueError("too many holes")
    numbers = [hole.hole_number for hole in holes]
    if len(set(numbers)) != len(numbers):
        raise ValueError("duplicate hole numbers")
    return holes


class CalculateIn(BaseModel):
    config: GameConfig
    holes: List[Hole]
    scores: Dict[str, Dict[str, Any]] = Field(default_factory=dict)

    @field_validator("holes")
    @classmethod
    def check_holes(cls, holes: List[Hole]) -> List[Hole]:
        return _validate_card(holes)


class GameCreateIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    round_id: str = Field(..., validation_alias=AliasChoices("round_id", "roundId"))
    config: GameConfig
    holes: Optional[List[Hole]] = None

    @field_validator("holes")
    @classmethod
    def check_holes(cls, holes: Optional[List[Hole]]) -> Optional[List[Hole]]:
        return holes if holes is None else _validate_card(holes)


class ScoreIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    player_id: str = Field(..., validation_alias=AliasChoices("player_id", "playerId"))
    hole_number: int = Field(
        ..., validation_alias=AliasChoices("hole_number", "holeNumber")
    )
    strokes: Optional[int] = None


@router.post("/calculate")
def calculate(payload: CalculateIn) -> Any:
    started = time.perf_counter()
    result = calculate_game(payload.config, payload.scores, payload.holes)
    outcome = "error" if isinstance(result, GameError) else "ok"
    observe_calculation(
        payload.config.format.value, outcome, (time.perf_counter() - started) * 1000.0
    )
    return result.model_dump(mode="json", by_alias=True)


@router.post("", status_code=status.HTTP_201_CREATED)
def create(payload: GameCreateIn, response: Response) -> Dict[str, Any]:
    holes = payload.holes
    if holes is None:
        holes = _default_card(get_settings().default_holes)
    game, created = create_game(payload.round_id, payload.config, holes)
    if not created:
        response.status_code = status.HTTP_200_OK
    return _game_out(game)


@router.get("/history")
def history() -> List[Dict[str, Any]]:
    return [_game_out(game) for game in game_history()]


@router.get("/round/{round_id}")
def games_for_round(round_id: str) -> List[Dict[str, Any]]:
    return [_game_out(game) for game in list_games_for_round(round_id)]


@router.get("/{game_id}")
def fetch(game_id: str) -> Dict[str, Any]:
    try:
        return _game_out(get_game(game_id))
    except GameNotFound:
        raise HTTPException(status_code=404, detail="game_not_found")


@router.post("/{game_id}/scores")
def post_score(game_id: str, payload: ScoreIn) -> Dict[str, Any]:
    try:
        game = record_score(
            game_id, payload.player_id, payload.hole_number, payload.strokes
        )
    except GameNotFound:
        raise HTTPException(status_code=404, detail="game_not_found")
    except GameCompleted:
        raise HTTPException(status_code=409, detail="game_completed")
    except ValueError:
        logger.info("rejected score for game %s: %s", game_id, payload)
        raise HTTPException(status_code=400, detail="invalid_score_entry")
    return _game_out(game)


@router.patch("/{game_id}/complete")
def complete(game_id: str) -> Dict[str, Any]:
    try:
        return _game_out(complete_game(game_id))
    except GameNotFound:
        raise HTTPException(status_code=404, detail="game_not_found")


@router.get("/{game_id}/report", response_class=PlainTextResponse)
def report(game_id: str) -> str:
    try:
        game = get_game(game_id)
    except GameNotFound:
        raise HTTPException(status_code=404, detail="game_not_found")
    return render_game_report(game.config, game.holes, game.scores, game.result)


@router.get("/{game_id}/stream")
async def stream_game(game_id: str) -> StreamingResponse:
    try:
        get_game(game_id)
    except GameNotFound:
        raise HTTPException(status_code=404, detail="game_not_found")

    async def event_generator():
        queue: "asyncio.Queue[dict]" = asyncio.Queue()
        loop = asyncio.get_running_loop()

        def callback(data: dict) -> None:
            loop.call_soon_threadsafe(queue.put_nowait, data)

        # Subscribe before the first snapshot so no score lands in between.
        events.subscribe(game_id, callback)

        try:
            snapshot = _game_out(get_game(game_id))
            yield f"data: {json.dumps(snapshot)}\n\n".encode("utf-8")
            while True:
                payload = await queue.get()
                yield f"data: {json.dumps(payload)}\n\n".encode("utf-8")
        finally:
            events.unsubscribe(game_id, callback)

    return StreamingResponse(event_generator(), media_type="text/event-stream")
