"""
FastAPI application entry point.

Run:
- development: uv run uvicorn src.app.main:app --reload --port 3000
- production: uv run nobt-web   (PORT selects the port, default 3000)
"""

import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import uvicorn
import yaml
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.app.providers import MockNobtProvider, NobtProvider
from src.app.responses import not_found_response

# Routes
from src.app.routes import assets, balances, bills, expenses, landing, nobts
from src.core.logging import setup_logging
from src.domain.constants import DEFAULT_HOST, DEFAULT_LOG_LEVEL, DEFAULT_PORT
from src.domain.errors import ErrorCodes, NobtError

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent

# =============================================================================
# Configuration
# =============================================================================


def load_config(config_path: Path | None = None) -> dict:
    """Load ``default.yaml``; a missing file means defaults everywhere."""
    if config_path is None:
        config_path = PROJECT_ROOT / "default.yaml"

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] = yaml.safe_load(f) or {}
        return data


def resolve_port(raw: str | None, default: int = DEFAULT_PORT) -> int:
    """
    Port from the ``PORT`` environment variable.

    Args:
        raw: Value of PORT (None or blank -> default)
        default: Fallback port

    Raises:
        NobtError: INVALID_PORT if not an integer in 1..65535
    """
    if raw is None or not raw.strip():
        return default

    try:
        port = int(raw.strip())
    except ValueError as e:
        raise NobtError(ErrorCodes.INVALID_PORT, value=raw) from e

    if not 0 < port < 65536:
        raise NobtError(ErrorCodes.INVALID_PORT, value=raw)
    return port


def build_provider(config: dict) -> NobtProvider:
    """Mock provider, optionally backed by ``provider.fixture_path``."""
    fixture_path = (config.get("provider") or {}).get("fixture_path")
    if fixture_path:
        path = Path(fixture_path)
        if not path.is_absolute():
            path = PROJECT_ROOT / path
        return MockNobtProvider.from_yaml(path)
    return MockNobtProvider()


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Load config and the data provider on startup."""
    app.state.config = load_config()
    app.state.provider = build_provider(app.state.config)
    logger.info(f"Serving nobts from {type(app.state.provider).__name__}")

    yield


# =============================================================================
# App Instance
# =============================================================================

app = FastAPI(
    title="nobt.io",
    description="Split your bills with ease",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(StarletteHTTPException)
async def not_found_fallback(request: Request, exc: StarletteHTTPException) -> Response:
    """Unmatched routes render the themed not-found page (status 200)."""
    if exc.status_code == 404:
        logger.debug(f"No route for {request.method} {request.url.path}")
        return not_found_response()
    return await http_exception_handler(request, exc)


# =============================================================================
# Routes
# =============================================================================


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check."""
    return {"status": "ok"}


# Fixed single-segment paths first, /{nobt_id} last
app.include_router(assets.router, tags=["Assets"])
app.include_router(landing.router, tags=["Landing"])
app.include_router(bills.router, tags=["Bills"])
app.include_router(balances.router, tags=["Balances"])
app.include_router(expenses.router, tags=["Expenses"])
app.include_router(nobts.router, tags=["Nobts"])


# =============================================================================
# CLI Entry Point
# =============================================================================


def run() -> None:
    """
    Console entry point (``nobt-web``).

    Exits with a message if PORT is not a valid port number.
    """
    load_dotenv()
    config = load_config()

    log_config = config.get("logging") or {}
    setup_logging(os.getenv("LOG_LEVEL") or log_config.get("level", DEFAULT_LOG_LEVEL))

    server = config.get("server") or {}
    try:
        port = resolve_port(os.getenv("PORT"), int(server.get("port", DEFAULT_PORT)))
    except NobtError as e:
        logger.critical(f"Failed to parse port: {e}")
        raise SystemExit(f"failed to parse port: {e.context.get('value')!r}") from e

    host = server.get("host", DEFAULT_HOST)
    logger.info(f"Listening on {host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level="info")


if __name__ == "__main__":
    run()
