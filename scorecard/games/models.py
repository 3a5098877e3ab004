"""Pydantic models for side games: players, holes, settings and results."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class GameFormat(str, Enum):
    SKINS = "skins"
    NASSAU = "nassau"
    STABLEFORD = "stableford"
    MATCH = "match"
    STROKE = "stroke"


class Player(BaseModel):
    id: str
    name: str
    handicap: Optional[float] = None

    model_config = ConfigDict(coerce_numbers_to_str=True)


class Hole(BaseModel):
    hole_number: int = Field(
        ge=1,
        validation_alias=AliasChoices("hole_number", "holeNumber"),
        serialization_alias="holeNumber",
    )
    par: int = Field(ge=1)

    model_config = ConfigDict(populate_by_name=True)


# Settings


class SkinsSettings(BaseModel):
    carry_over: bool = Field(
        default=True,
        validation_alias=AliasChoices("carry_over", "carryOver"),
        serialization_alias="carryOver",
    )
    skin_value: float = Field(
        default=5.0,
        validation_alias=AliasChoices("skin_value", "skinValue"),
        serialization_alias="skinValue",
    )


class NassauSettings(BaseModel):
    front_bet: float = Field(
        default=2.0,
        validation_alias=AliasChoices("front_bet", "frontBet"),
        serialization_alias="frontBet",
    )
    back_bet: float = Field(
        default=2.0,
        validation_alias=AliasChoices("back_bet", "backBet"),
        serialization_alias="backBet",
    )
    overall_bet: float = Field(
        default=2.0,
        validation_alias=AliasChoices("overall_bet", "overallBet"),
        serialization_alias="overallBet",
    )
    use_handicaps: bool = Field(
        default=True,
        validation_alias=AliasChoices("use_handicaps", "useHandicaps"),
        serialization_alias="useHandicaps",
    )
    # Accepted for compatibility; presses are not scored as side matches.
    presses: bool = False


class StablefordSettings(BaseModel):
    eagle_points: int = Field(
        default=4,
        validation_alias=AliasChoices("eagle_points", "eaglePoints"),
        serialization_alias="eaglePoints",
    )
    birdie_points: int = Field(
        default=3,
        validation_alias=AliasChoices("birdie_points", "birdiePoints"),
        serialization_alias="birdiePoints",
    )
    par_points: int = Field(
        default=2,
        validation_alias=AliasChoices("par_points", "parPoints"),
        serialization_alias="parPoints",
    )
    bogey_points: int = Field(
        default=1,
        validation_alias=AliasChoices("bogey_points", "bogeyPoints"),
        serialization_alias="bogeyPoints",
    )
    use_handicaps: bool = Field(
        default=True,
        validation_alias=AliasChoices("use_handicaps", "useHandicaps"),
        serialization_alias="useHandicaps",
    )


class MatchPlaySettings(BaseModel):
    use_handicaps: bool = Field(
        default=True,
        validation_alias=AliasChoices("use_handicaps", "useHandicaps"),
        serialization_alias="useHandicaps",
    )
    # Inert flag, concessions are entered as scores by the caller.
    concession_allowed: bool = Field(
        default=True,
        validation_alias=AliasChoices("concession_allowed", "concessionAllowed"),
        serialization_alias="concessionAllowed",
    )


class StrokePlaySettings(BaseModel):
    use_handicaps: bool = Field(
        default=False,
        validation_alias=AliasChoices("use_handicaps", "useHandicaps"),
        serialization_alias="useHandicaps",
    )


SETTINGS_MODELS: Dict[GameFormat, Type[BaseModel]] = {
    GameFormat.SKINS: SkinsSettings,
    GameFormat.NASSAU: NassauSettings,
    GameFormat.STABLEFORD: StablefordSettings,
    GameFormat.MATCH: MatchPlaySettings,
    GameFormat.STROKE: StrokePlaySettings,
}


class GameConfig(BaseModel):
    format: GameFormat
    name: str = ""
    settings: Dict[str, Any] = Field(default_factory=dict)
    players: List[Player] = Field(default_factory=list)

    def resolved_settings(self) -> BaseModel:
        """Validate the raw settings mapping into this format's settings model."""

        return SETTINGS_MODELS[self.format].model_validate(self.settings)


# Results


class GameError(BaseModel):
    """Returned instead of a result when the configuration cannot be scored."""

    error: str


class SkinsResult(BaseModel):
    hole_winners: Dict[int, Optional[str]] = Field(
        default_factory=dict, serialization_alias="holeWinners"
    )
    skins_won: Dict[str, int] = Field(
        default_factory=dict, serialization_alias="skinsWon"
    )
    carried_holes: List[int] = Field(
        default_factory=list, serialization_alias="carriedHoles"
    )
    total_carried: int = Field(default=0, serialization_alias="totalCarried")
    current_status: str = Field(default="", serialization_alias="currentStatus")
    skin_value: float = Field(default=5.0, serialization_alias="skinValue")
    winnings: Dict[str, float] = Field(default_factory=dict)


class NassauSegment(BaseModel):
    holes_won: Dict[str, int] = Field(
        default_factory=dict, serialization_alias="holesWon"
    )
    holes_lost: Dict[str, int] = Field(
        default_factory=dict, serialization_alias="holesLost"
    )
    holes_tied: int = Field(default=0, serialization_alias="holesTied")
    status: str = "All Square"
    thru: int = 0
    winner: Optional[str] = None


class NassauResult(BaseModel):
    front: NassauSegment
    back: NassauSegment
    overall: NassauSegment
    hole_results: Dict[int, str] = Field(
        default_factory=dict, serialization_alias="holeResults"
    )
    presses: List[Dict[str, Any]] = Field(default_factory=list)
    front_bet: float = Field(default=2.0, serialization_alias="frontBet")
    back_bet: float = Field(default=2.0, serialization_alias="backBet")
    overall_bet: float = Field(default=2.0, serialization_alias="overallBet")


class StablefordEntry(BaseModel):
    player_id: str = Field(serialization_alias="playerId")
    player_name: str = Field(serialization_alias="playerName")
    points: int


class StablefordResult(BaseModel):
    player_points: Dict[str, int] = Field(
        default_factory=dict, serialization_alias="playerPoints"
    )
    hole_points: Dict[int, Dict[str, int]] = Field(
        default_factory=dict, serialization_alias="holePoints"
    )
    holes_played: Dict[str, int] = Field(
        default_factory=dict, serialization_alias="holesPlayed"
    )
    leaderboard: List[StablefordEntry] = Field(default_factory=list)


class MatchPlayResult(BaseModel):
    player1_holes: int = Field(default=0, serialization_alias="player1Holes")
    player2_holes: int = Field(default=0, serialization_alias="player2Holes")
    hole_results: Dict[int, str] = Field(
        default_factory=dict, serialization_alias="holeResults"
    )
    status: str = "All Square"
    leader: Optional[str] = None
    holes_played: int = Field(default=0, serialization_alias="holesPlayed")
    holes_remaining: int = Field(default=0, serialization_alias="holesRemaining")
    match_closed: bool = Field(default=False, serialization_alias="matchClosed")
    closed_after_hole: Optional[int] = Field(
        default=None, serialization_alias="closedAfterHole"
    )
    winner: Optional[str] = None
    thru: int = 0
    handicap_strokes: int = Field(default=0, serialization_alias="handicapStrokes")
    stroke_receiver: Optional[str] = Field(
        default=None, serialization_alias="strokeReceiver"
    )


class StrokeTotals(BaseModel):
    gross: int = 0
    net: int = 0
    to_par: int = Field(default=0, serialization_alias="toPar")
    holes_played: int = Field(default=0, serialization_alias="holesPlayed")
    handicap_strokes: int = Field(default=0, serialization_alias="handicapStrokes")


class GrossLeaderboardEntry(BaseModel):
    player_id: str = Field(serialization_alias="playerId")
    player_name: str = Field(serialization_alias="playerName")
    gross: int
    to_par: int = Field(serialization_alias="toPar")
    holes_played: int = Field(serialization_alias="holesPlayed")


class NetLeaderboardEntry(BaseModel):
    player_id: str = Field(serialization_alias="playerId")
    player_name: str = Field(serialization_alias="playerName")
    net: int
    handicap_strokes: int = Field(serialization_alias="handicapStrokes")


class StrokePlayResult(BaseModel):
    player_totals: Dict[str, StrokeTotals] = Field(
        default_factory=dict, serialization_alias="playerTotals"
    )
    leaderboard: List[GrossLeaderboardEntry] = Field(default_factory=list)
    net_leaderboard: List[NetLeaderboardEntry] = Field(
        default_factory=list, serialization_alias="netLeaderboard"
    )


GameResult = Union[
    SkinsResult,
    NassauResult,
    StablefordResult,
    MatchPlayResult,
    StrokePlayResult,
    GameError,
]


# Coercion helpers so calculators accept models or plain mappings.

_M = TypeVar("_M", bound=BaseModel)


def coerce_players(players: Iterable[Player | Mapping[str, Any]]) -> List[Player]:
    return [Player.model_validate(p) if not isinstance(p, Player) else p for p in players]


def coerce_holes(holes: Iterable[Hole | Mapping[str, Any]]) -> List[Hole]:
    return [Hole.model_validate(h) if not isinstance(h, Hole) else h for h in holes]


def coerce_settings(
    model: Type[_M], settings: _M | Mapping[str, Any] | None
) -> _M:
    if settings is None:
        return model()
    if isinstance(settings, model):
        return settings
    if isinstance(settings, BaseModel):
        settings = settings.model_dump(by_alias=True)
    return model.model_validate(dict(settings))


__all__ = [
    "GameFormat",
    "Player",
    "Hole",
    "SkinsSettings",
    "NassauSettings",
    "StablefordSettings",
    "MatchPlaySettings",
    "StrokePlaySettings",
    "SETTINGS_MODELS",
    "GameConfig",
    "GameError",
    "SkinsResult",
    "NassauSegment",
    "NassauResult",
    "StablefordEntry",
    "StablefordResult",
    "MatchPlayResult",
    "StrokeTotals",
    "GrossLeaderboardEntry",
    "NetLeaderboardEntry",
    "StrokePlayResult",
    "GameResult",
    "coerce_players",
    "coerce_holes",
    "coerce_settings",
]
