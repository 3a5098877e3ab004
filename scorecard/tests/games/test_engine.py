from __future__ import annotations

import copy

import pytest

from scorecard.games.engine import (
    ScoreEntered,
    calculate_game,
    initial_state,
    reduce_game,
)
from scorecard.games.match_play import calculate_match_play
from scorecard.games.models import (
    GameConfig,
    GameError,
    GameFormat,
    MatchPlayResult,
    Player,
    SkinsResult,
    SkinsSettings,
)
from scorecard.games.nassau import calculate_nassau
from scorecard.games.skins import calculate_skins
from scorecard.games.stableford import calculate_stableford
from scorecard.games.stroke_play import calculate_stroke_play

from .helpers import build_card

CALCULATORS = [
    calculate_skins,
    calculate_nassau,
    calculate_stableford,
    calculate_match_play,
    calculate_stroke_play,
]


def _players():
    return [
        Player(id="a", name="Alice", handicap=8),
        Player(id="b", name="Bob", handicap=14),
    ]


def _front_nine_only():
    alice = {h: 4 if h % 2 else 5 for h in range(1, 10)}
    bob = {h: 5 if h % 2 else 4 for h in range(1, 10)}
    return {"a": alice, "b": bob}


@pytest.mark.parametrize("calculator", CALCULATORS)
def test_same_inputs_same_result(calculator) -> None:
    scores = _front_nine_only()
    card = build_card()

    first = calculator(scores, _players(), card)
    second = calculator(scores, _players(), card)

    assert first.model_dump() == second.model_dump()


@pytest.mark.parametrize("calculator", CALCULATORS)
def test_score_table_is_not_mutated(calculator) -> None:
    scores = {"a": {1: 4, "2": "5", 3: None}, "b": {1: 0, 2: 4}}
    before = copy.deepcopy(scores)

    calculator(scores, _players(), build_card())

    assert scores == before


@pytest.mark.parametrize("calculator", CALCULATORS)
def test_back_nine_missing_does_not_raise(calculator) -> None:
    calculator(_front_nine_only(), _players(), build_card())


def test_partial_round_reports_nine_holes_played() -> None:
    scores = _front_nine_only()
    card = build_card()

    stroke = calculate_stroke_play(scores, _players(), card)
    stableford = calculate_stableford(scores, _players(), card)
    match = calculate_match_play(scores, _players(), card, {"useHandicaps": False})

    assert {t.holes_played for t in stroke.player_totals.values()} == {9}
    assert stableford.holes_played == {"a": 9, "b": 9}
    assert match.holes_played == 9
    assert match.match_closed is False
    assert match.winner is None
    assert match.status == "Alice 1 UP"


def test_calculators_accept_plain_mappings() -> None:
    result = calculate_skins(
        {"1": {"1": 3}, "2": {"1": 4}},
        [{"id": 1, "name": "Ann"}, {"id": 2, "name": "Ben", "handicap": None}],
        [{"holeNumber": 1, "par": 4}],
        {"carry_over": False},
    )

    assert result.skins_won == {"1": 1, "2": 0}


def test_calculate_game_dispatches_on_format() -> None:
    config = {
        "format": "skins",
        "name": "Saturday skins",
        "settings": {"skinValue": 2},
        "players": [{"id": "a", "name": "Alice"}, {"id": "b", "name": "Bob"}],
    }

    result = calculate_game(config, {"a": {1: 3}, "b": {1: 4}}, build_card())

    assert isinstance(result, SkinsResult)
    assert result.winnings["a"] == 2.0


def test_calculate_game_surfaces_error_result() -> None:
    config = GameConfig(format=GameFormat.MATCH, players=[Player(id="a", name="Solo")])

    result = calculate_game(config, {}, build_card())

    assert isinstance(result, GameError)


def test_resolved_settings_uses_format_model() -> None:
    config = GameConfig(format=GameFormat.SKINS, settings={"carryOver": "false"})

    settings = config.resolved_settings()

    assert isinstance(settings, SkinsSettings)
    assert settings.carry_over is False
    assert settings.skin_value == 5.0


def test_reducer_recomputes_without_touching_previous_state() -> None:
    config = GameConfig(
        format=GameFormat.MATCH,
        settings={"useHandicaps": False},
        players=[Player(id="a", name="Alice"), Player(id="b", name="Bob")],
    )
    state = initial_state(config, build_card())
    assert state.scores == {"a": {}, "b": {}}

    after_a = reduce_game(state, ScoreEntered(player_id="a", hole_number=1, strokes=3))
    after_b = reduce_game(after_a, ScoreEntered(playerId="b", holeNumber=1, strokes=4))

    assert state.scores == {"a": {}, "b": {}}
    assert after_a.scores == {"a": {1: 3}, "b": {}}
    assert isinstance(after_b.result, MatchPlayResult)
    assert after_b.result.status == "Alice 1 UP"

    cleared = reduce_game(after_b, ScoreEntered(player_id="a", hole_number=1, strokes=None))
    assert cleared.scores["a"] == {}
    assert cleared.result.holes_played == 0
    assert after_b.scores["a"] == {1: 3}
