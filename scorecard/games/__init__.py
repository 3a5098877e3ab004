"""Side game scoring: skins, nassau, stableford, match play and stroke play."""

from .engine import (  # noqa: F401
    GameState,
    ScoreEntered,
    calculate_game,
    initial_state,
    reduce_game,
)
from .match_play import calculate_match_play  # noqa: F401
from .models import (  # noqa: F401
    GameConfig,
    GameError,
    GameFormat,
    GameResult,
    Hole,
    Player,
)
from .nassau import calculate_nassau  # noqa: F401
from .report import render_game_report  # noqa: F401
from .skins import calculate_skins  # noqa: F401
from .stableford import calculate_stableford, calculate_stableford_points  # noqa: F401
from .stroke_play import calculate_stroke_play  # noqa: F401
