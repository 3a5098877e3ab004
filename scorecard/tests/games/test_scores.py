from __future__ import annotations

import pytest

from scorecard.games.scores import normalize_scores, parse_hole_number, parse_strokes
from scorecard.games.skins import calculate_skins


@pytest.mark.parametrize(
    "raw,expected",
    [
        (4, 4),
        ("5", 5),
        (" 6 ", 6),
        (3.0, 3),
        (0, None),
        (-2, None),
        ("", None),
        (None, None),
        (True, None),
        (4.5, None),
        ("abc", None),
        ("²", None),
        (float("nan"), None),
    ],
)
def test_parse_strokes(raw, expected) -> None:
    assert parse_strokes(raw) == expected


def test_parse_hole_number_accepts_digit_strings() -> None:
    assert parse_hole_number("7") == 7
    assert parse_hole_number(3) == 3
    assert parse_hole_number(0) is None
    assert parse_hole_number("front") is None
    assert parse_hole_number("²") is None


def test_normalize_drops_unplayed_and_copies() -> None:
    raw = {"a": {"1": 4, "2": "", 3: None, "4": 0}, "b": None}

    normalized = normalize_scores(raw)

    assert normalized == {"a": {1: 4}, "b": {}}
    normalized["a"][1] = 9
    assert raw["a"]["1"] == 4


def test_normalize_empty_table() -> None:
    assert normalize_scores(None) == {}
    assert normalize_scores({}) == {}


def test_superscript_digits_count_as_unplayed(alice, bob, card) -> None:
    result = calculate_skins({"a": {1: "²", "²": 4}, "b": {1: 4}}, [alice, bob], card)

    assert result.hole_winners == {1: "b"}
    assert result.skins_won == {"a": 0, "b": 1}
