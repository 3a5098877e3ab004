from __future__ import annotations

from typing import List

import pytest

from scorecard.games.models import Hole, Player

from .helpers import build_card


@pytest.fixture
def card() -> List[Hole]:
    return build_card()


@pytest.fixture
def alice() -> Player:
    return Player(id="a", name="Alice")


@pytest.fixture
def bob() -> Player:
    return Player(id="b", name="Bob")


@pytest.fixture
def cara() -> Player:
    return Player(id="c", name="Cara")
