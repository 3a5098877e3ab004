from __future__ import annotations

import platform
import time
from typing import Any, Dict

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from scorecard.api.routers.games import router as games_router
from scorecard.config import get_settings
from scorecard.metrics import BUILD_VERSION, GIT_SHA, MetricsMiddleware, metrics_app


async def health() -> Dict[str, Any]:
    return {
        "status": "ok",
        "version": BUILD_VERSION,
        "git": GIT_SHA,
        "ts": time.time(),
        "runtime": {
            "python": platform.python_version(),
        },
    }


app = FastAPI(title="scorecard")

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(MetricsMiddleware)

app.include_router(games_router)
app.add_api_route(
    "/health",
    health,
    methods=["GET"],
    response_model=None,
    tags=["health"],
)


_metrics_router = APIRouter()


@_metrics_router.get("/metrics", include_in_schema=False)
async def _metrics_endpoint(request: Request):
    return await metrics_app(request)


app.include_router(_metrics_router)
