"""FastAPI MCP Server for SEPTA real-time transit data."""

import json
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Annotated

import httpx
from fastapi import Depends, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import __version__
from .api.deps import get_engine
from .config import configure_logging, settings
from .engine import TransitEngine
from .engine.core.endpoints import DEFAULT_PROVIDER_HOST
from .mcp import (
    INTERNAL_ERROR,
    PARSE_ERROR,
    SERVER_NAME,
    TOOL_DEFINITIONS,
    handle_mcp_request,
    jsonrpc_error,
)
from .models import HealthResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    # Startup
    logger.info(f"Starting {SERVER_NAME} v{__version__} (provider: {settings.provider_host})")

    if not settings.debug and settings.cors_allowed_origins == "*":
        logger.warning("CORS is configured to allow all origins ('*').")

    client = httpx.AsyncClient(timeout=settings.fetch_timeout, follow_redirects=False)
    app.state.engine = TransitEngine.create(
        provider_host=settings.provider_host,
        timeout=settings.fetch_timeout,
        user_agent=settings.user_agent,
        client=client,
    )

    yield
    # Shutdown
    await app.state.engine.aclose()
    await client.aclose()
    app.state.engine = None


app = FastAPI(
    title=SERVER_NAME,
    description="MCP endpoint for SEPTA real-time bus and trolley data",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


# ============ EXCEPTION HANDLERS ============


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with a JSON-RPC internal error."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content=jsonrpc_error(None, INTERNAL_ERROR, "Internal server error"),
    )


# ============ HEALTH ENDPOINTS ============


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check() -> HealthResponse:
    """Health check endpoint (lightweight liveness check)."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(timezone.utc),
    )


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint with server and upstream API info."""
    host = settings.provider_host or DEFAULT_PROVIDER_HOST
    return {
        "name": SERVER_NAME,
        "version": __version__,
        "status": "active",
        "protocol": "MCP JSON-RPC 2.0",
        "tools": [tool["name"] for tool in TOOL_DEFINITIONS],
        "endpoints": {
            "health": "GET /health",
            "mcp": "POST /",
        },
        "apiEndpoints": {
            "transitView": f"https://{host}/api/TransitView/index.php?route={{route}}",
            "busDetours": f"https://{host}/api/BusDetours/index.php?route={{route}}",
            "alerts": f"https://{host}/api/Alerts/index.php",
        },
        "note": "Each lookup falls back across HTTPS, HTTP and alternate endpoints for reliability",
    }


# ============ MCP ENDPOINTS ============


@app.post("/", tags=["MCP"])
@app.post("/mcp", tags=["MCP"])
async def mcp_endpoint(
    raw_request: Request,
    engine: Annotated[TransitEngine, Depends(get_engine)],
) -> Response:
    """
    Handle an MCP JSON-RPC 2.0 request.

    Args:
        raw_request: The raw FastAPI request (body parsed here so parse
            errors can be reported as JSON-RPC errors)
        engine: Transit engine from the application state

    Returns:
        JSON-RPC response, or 202 with no body for notifications
    """
    try:
        body = json.loads(await raw_request.body())
    except ValueError:
        return JSONResponse(content=jsonrpc_error(None, PARSE_ERROR, "Parse error"))

    response = await handle_mcp_request(body, engine, request_timeout=settings.request_timeout)
    if response is None:
        return Response(status_code=202)
    return JSONResponse(content=response)


# ============ MAIN ============


def main():
    """Run the server with uvicorn."""
    import uvicorn

    configure_logging()
    uvicorn.run(
        "septa_mcp.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
