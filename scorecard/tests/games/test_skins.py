from __future__ import annotations

from scorecard.games.skins import calculate_skins, skins_leader


def test_tied_hole_carries_to_next_outright_win(alice, bob, card) -> None:
    scores = {"a": {1: 4, 2: 3}, "b": {1: 4, 2: 4}}

    result = calculate_skins(scores, [alice, bob], card, {"carryOver": True})

    assert result.skins_won == {"a": 2, "b": 0}
    assert result.total_carried == 0
    assert result.carried_holes == [1]
    assert result.hole_winners == {1: None, 2: "a"}
    assert result.current_status == "Alice leads with 2 skins"


def test_tied_skin_is_lost_without_carry_over(alice, bob, card) -> None:
    scores = {"a": {1: 4, 2: 3, 3: 5}, "b": {1: 4, 2: 4, 3: 4}}

    result = calculate_skins(scores, [alice, bob], card, {"carryOver": False})

    unique_winner_holes = sum(1 for winner in result.hole_winners.values() if winner)
    assert result.skins_won == {"a": 1, "b": 1}
    assert sum(result.skins_won.values()) == unique_winner_holes == 2
    assert result.carried_holes == []
    assert result.total_carried == 0


def test_pending_carry_reported_in_status(alice, bob, card) -> None:
    scores = {"a": {1: 5, 2: 4}, "b": {1: 5, 2: 4}}

    result = calculate_skins(scores, [alice, bob], card)

    assert result.total_carried == 2
    assert result.carried_holes == [1, 2]
    assert result.current_status == "2 skins carried"


def test_hole_scored_among_players_who_posted(alice, bob, cara, card) -> None:
    # Cara has not reached hole 2 yet; the skin is decided between the others.
    scores = {"a": {1: 4, 2: 5}, "b": {1: 5, 2: 6}, "c": {1: 5}}

    result = calculate_skins(scores, [alice, bob, cara], card)

    assert result.hole_winners == {1: "a", 2: "a"}
    assert result.skins_won["a"] == 2
    assert result.current_status == "Alice leads with 2 skins"


def test_single_entrant_wins_hole_and_unplayed_holes_skipped(alice, bob, card) -> None:
    scores = {"a": {1: 0, 2: ""}, "b": {2: 6}}

    result = calculate_skins(scores, [alice, bob], card)

    assert 1 not in result.hole_winners
    assert result.hole_winners == {2: "b"}
    assert result.current_status == "Bob leads with 1 skin"


def test_winnings_use_skin_value(alice, bob, card) -> None:
    scores = {"a": {1: 3}, "b": {1: 4}}

    result = calculate_skins(scores, [alice, bob], card, {"skinValue": "10"})

    assert result.skin_value == 10.0
    assert result.winnings == {"a": 10.0, "b": 0.0}


def test_no_scores_yields_empty_status(alice, bob, card) -> None:
    result = calculate_skins({}, [alice, bob], card)

    assert result.skins_won == {"a": 0, "b": 0}
    assert result.hole_winners == {}
    assert result.current_status == ""


def test_skins_leader_prefers_first_player_on_tie(alice, bob) -> None:
    leader = skins_leader({"a": 2, "b": 2}, [alice, bob])

    assert leader is not None
    assert leader[0].id == "a"
    assert skins_leader({"a": 0, "b": 0}, [alice, bob]) is None
