"""FastAPI application for bet scoring and goal forecasting.

This module provides a stateless HTTP API over the ``practice`` package:
- GET /health - Liveness and active configuration
- POST /evidence/confidence - Weighted confidence and timeline from beliefs/actions
- POST /bets/score - Valuation and ranking score for one bet
- POST /bets/rank - Score and rank a list of bets
- POST /trends/comparison - Look-back comparison reading and delta
- POST /goals/progress - Met / close / far bucket for a goal
- POST /goals/forecast - Constant-rate ETA for a goal
- POST /goals/summary - All of the above for one goal metric

Requirements:
- No database and no outbound calls; callers send the records to score
- No authentication (local network only)
"""

from __future__ import annotations

import logging
import time
from dataclasses import asdict
from typing import Any

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from api.routes import bets, goals
from practice import __version__
from practice.config import ForecastConfig, ScoringConfig, default_annual_salary

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Practice Scoring API",
    description="Bet ranking scores, evidence aggregation and goal forecasts",
    version=__version__,
)

app.include_router(bets.router)
app.include_router(goals.router)

# Track API start time
_api_start_time = time.time()


@app.get("/health")
async def health() -> dict[str, Any]:
    """Health check endpoint.

    Returns:
        JSON with uptime and the constants the engine is running with.
    """
    return {
        "status": "ok",
        "version": __version__,
        "uptime_seconds": int(time.time() - _api_start_time),
        "config": {
            "scoring": asdict(ScoringConfig.from_env()),
            "forecast": asdict(ForecastConfig.from_env()),
            "annual_salary": default_annual_salary(),
        },
    }


@app.exception_handler(Exception)
async def global_exception_handler(_request, exc):
    """Global exception handler to ensure consistent error responses."""
    logger.error(f"Unhandled error: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred",
        },
    )
