"""Telemetry helpers for side game lifecycle instrumentation."""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, Mapping, MutableMapping, Optional

GamesTelemetryEmitter = Callable[[str, Mapping[str, object]], None]

_emitter: Optional[GamesTelemetryEmitter] = None
_logger = logging.getLogger("scorecard.telemetry.games")


def set_games_telemetry_emitter(candidate: GamesTelemetryEmitter | None) -> None:
    """Register a telemetry emitter used for games instrumentation."""

    global _emitter
    _emitter = candidate if callable(candidate) else None


def _now_ms() -> int:
    return int(time.time() * 1000)


def _safe_emit(event: str, payload: MutableMapping[str, object]) -> None:
    if not _emitter:
        _logger.debug("telemetry emitter not configured for event %s", event)
        return
    try:
        _emitter(event, dict(payload))
    except Exception:  # pragma: no cover - defensive logging only
        _logger.exception("failed to emit telemetry event %s", event)


def record_game_created(game_id: str, round_id: str, game_format: str) -> None:
    payload: Dict[str, object] = {
        "gameId": game_id,
        "roundId": round_id,
        "format": game_format,
        "ts": _now_ms(),
    }
    _safe_emit("games.create", payload)


def record_score_write(
    game_id: str,
    hole_number: int,
    duration_ms: float,
    *,
    status: str,
) -> None:
    payload: Dict[str, object] = {
        "gameId": game_id,
        "hole": hole_number,
        "durationMs": int(max(0, round(duration_ms))),
        "status": status,
        "ts": _now_ms(),
    }
    _safe_emit("games.score", payload)


def record_game_completed(game_id: str, *, winner: str | None = None) -> None:
    payload: Dict[str, object] = {"gameId": game_id, "ts": _now_ms()}
    if winner:
        payload["winner"] = winner
    _safe_emit("games.complete", payload)


__all__ = [
    "GamesTelemetryEmitter",
    "set_games_telemetry_emitter",
    "record_game_created",
    "record_score_write",
    "record_game_completed",
]
