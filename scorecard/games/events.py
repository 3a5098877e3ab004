"""Live game snapshots for the SSE stream.

The store publishes the full serialized game after every score entry and on
completion; each open stream registers one listener for its game.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Any, Callable, Dict, List, Set

logger = logging.getLogger(__name__)

GameSnapshot = Dict[str, Any]
GameListener = Callable[[GameSnapshot], None]

_LISTENERS: Dict[str, Set[GameListener]] = {}
_LOCK = Lock()


def subscribe(game_id: str, listener: GameListener) -> None:
    with _LOCK:
        _LISTENERS.setdefault(game_id, set()).add(listener)


def unsubscribe(game_id: str, listener: GameListener) -> None:
    with _LOCK:
        listeners = _LISTENERS.get(game_id)
        if listeners is None:
            return
        listeners.discard(listener)
        if not listeners:
            del _LISTENERS[game_id]


def subscriber_count(game_id: str) -> int:
    """Number of open streams watching ``game_id``."""

    with _LOCK:
        return len(_LISTENERS.get(game_id, ()))


def publish(game_id: str, snapshot: GameSnapshot) -> int:
    """Hand ``snapshot`` to every listener of ``game_id``.

    Returns how many listeners received it. A failing listener is logged and
    does not stop delivery to the others.
    """

    with _LOCK:
        listeners: List[GameListener] = list(_LISTENERS.get(game_id, ()))
    delivered = 0
    for listener in listeners:
        try:
            listener(snapshot)
        except Exception:
            logger.exception("game stream listener failed for %s", game_id)
            continue
        delivered += 1
    if listeners:
        logger.debug(
            "published game %s status=%s to %d/%d listeners",
            game_id,
            snapshot.get("status"),
            delivered,
            len(listeners),
        )
    return delivered


def _reset_state() -> None:
    with _LOCK:
        _LISTENERS.clear()


__all__ = [
    "GameSnapshot",
    "GameListener",
    "subscribe",
    "unsubscribe",
    "subscriber_count",
    "publish",
]
