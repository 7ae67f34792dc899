#!/usr/bin/env python3
"""Run the FastAPI scoring API server.

This script starts the uvicorn server for the stateless scoring API.

Usage:
    python scripts/run_api.py [--host HOST] [--port PORT]

Environment:
    PRACTICE_ANNUAL_SALARY - Optional. Default opportunity-cost rate.
    PRACTICE_* - Optional. Overrides for scoring/forecast constants.

Examples:
    python scripts/run_api.py
    python scripts/run_api.py --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Ensure imports work when invoked as a script
_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))


def main() -> int:
    """Run the API server."""
    parser = argparse.ArgumentParser(description="Run the FastAPI scoring API server.")
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind to (default: 8000)",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    print(f"Starting FastAPI server on {args.host}:{args.port}")
    print("Endpoints:")
    print(f"  - GET  http://{args.host}:{args.port}/health")
    print(f"  - POST http://{args.host}:{args.port}/bets/rank")
    print(f"  - POST http://{args.host}:{args.port}/goals/summary")
    print()

    import uvicorn

    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )

    return 0


if __name__ == "__main__":
    sys.exit(main())
