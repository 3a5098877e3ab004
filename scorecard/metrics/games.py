from __future__ import annotations

from prometheus_client import Counter, Histogram

from . import REGISTRY

GAME_CALCULATIONS_TOTAL = Counter(
    "games_calculations_total",
    "Side game recalculations by format and outcome",
    ["format", "outcome"],
    registry=REGISTRY,
)

GAME_CALCULATION_LATENCY_MS = Histogram(
    "games_calculation_latency_ms",
    "Latency of a full side game recalculation (milliseconds)",
    ["format"],
    registry=REGISTRY,
    buckets=(0.1, 0.25, 0.5, 1, 2, 5, 10, 25, 50),
)


def observe_calculation(game_format: str, outcome: str, duration_ms: float) -> None:
    """Record one recalculation; ``outcome`` is ``ok`` or ``error``."""

    GAME_CALCULATIONS_TOTAL.labels(format=game_format, outcome=outcome).inc()
    if duration_ms >= 0:
        GAME_CALCULATION_LATENCY_MS.labels(format=game_format).observe(duration_ms)


__all__ = [
    "GAME_CALCULATIONS_TOTAL",
    "GAME_CALCULATION_LATENCY_MS",
    "observe_calculation",
]
