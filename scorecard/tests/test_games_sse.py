from __future__ import annotations

import json

import pytest
from httpx import ASGITransport, AsyncClient

from scorecard.api.routers.games import stream_game
from scorecard.app import app
from scorecard.games import events


def _decode_event(raw: bytes) -> dict:
    line = raw.decode()
    if line.startswith("data: "):
        return json.loads(line[len("data: ") :])
    raise AssertionError(f"Unexpected SSE payload: {line}")


@pytest.mark.anyio
async def test_game_stream_emits_recomputed_result() -> None:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        create_payload = {
            "roundId": "round-live",
            "config": {
                "format": "skins",
                "name": "Live",
                "players": [
                    {"id": "p1", "name": "Alice"},
                    {"id": "p2", "name": "Bob"},
                ],
            },
            "holes": [{"holeNumber": n, "par": 4} for n in range(1, 4)],
        }
        create_response = await client.post("/api/games", json=create_payload)
        assert create_response.status_code == 201
        game_id = create_response.json()["id"]

        streaming_response = await stream_game(game_id)
        generator = streaming_response.body_iterator
        try:
            initial = _decode_event(await generator.__anext__())
            assert initial["id"] == game_id
            assert initial["scores"] == {"p1": {}, "p2": {}}
            assert initial["result"]["skinsWon"] == {"p1": 0, "p2": 0}
            assert events.subscriber_count(game_id) == 1

            score_response = await client.post(
                f"/api/games/{game_id}/scores",
                json={"playerId": "p1", "holeNumber": 1, "strokes": 3},
            )
            assert score_response.status_code == 200

            updated = _decode_event(await generator.__anext__())
            assert updated["scores"] == {"p1": {"1": 3}, "p2": {}}
            assert updated["result"]["skinsWon"] == {"p1": 1, "p2": 0}
            assert updated["result"]["currentStatus"] == "Alice leads with 1 skin"
        finally:
            await generator.aclose()

    assert events.subscriber_count(game_id) == 0
