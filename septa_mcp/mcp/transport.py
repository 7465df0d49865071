"""MCP JSON-RPC dispatcher.

Handles the ``initialize``, ``tools/list`` and ``tools/call`` methods and
turns transit errors into JSON-RPC error responses.
"""

import asyncio
import json
import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from .. import __version__
from ..api.deps import sanitize_error_message
from ..engine import TransitEngine
from ..engine.core.errors import AllEndpointsFailedError, ValidationError
from ..models import (
    CallToolResult,
    InitializeResult,
    JSONRPCRequest,
    ServerInfo,
    TextContent,
    ToolCallParams,
)
from .jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    JSONRPC_VERSION,
    METHOD_NOT_FOUND,
    SERVER_ERROR,
    jsonrpc_error,
    jsonrpc_response,
)
from .tool_defs import TOOL_DEFINITIONS

logger = logging.getLogger(__name__)

PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "SEPTA Transit MCP"


async def handle_mcp_request(
    body: Any,
    engine: TransitEngine,
    request_timeout: float | None = None,
) -> dict | None:
    """Dispatch one JSON-RPC request.

    Args:
        body: Decoded JSON request body
        engine: Transit engine executing tool calls
        request_timeout: Overall budget for tools/call in seconds (None = unbounded)

    Returns:
        JSON-RPC response dict, or None for notifications
    """
    request_id = body.get("id") if isinstance(body, dict) else None

    if not isinstance(body, dict) or body.get("jsonrpc") != JSONRPC_VERSION:
        return jsonrpc_error(request_id, INVALID_REQUEST, 'Invalid Request: jsonrpc must be "2.0"')

    try:
        request = JSONRPCRequest.model_validate(body)
    except PydanticValidationError:
        return jsonrpc_error(request_id, INVALID_REQUEST, "Invalid Request: malformed envelope")

    if request.method.startswith("notifications/"):
        logger.debug(f"Received notification: {request.method}")
        return None

    try:
        if request.method == "initialize":
            result = InitializeResult(
                protocolVersion=PROTOCOL_VERSION,
                serverInfo=ServerInfo(name=SERVER_NAME, version=__version__),
            )
            return jsonrpc_response(request.id, result.model_dump())

        if request.method == "tools/list":
            return jsonrpc_response(request.id, {"tools": TOOL_DEFINITIONS})

        if request.method == "tools/call":
            return await _handle_tools_call(request, engine, request_timeout)

        return jsonrpc_error(request.id, METHOD_NOT_FOUND, f"Method not found: {request.method}")

    except Exception as e:
        logger.error(f"MCP request failed: {e}", exc_info=True)
        return jsonrpc_error(request.id, INTERNAL_ERROR, sanitize_error_message(e))


async def _handle_tools_call(
    request: JSONRPCRequest,
    engine: TransitEngine,
    request_timeout: float | None,
) -> dict:
    try:
        call = ToolCallParams.model_validate(request.params or {})
    except PydanticValidationError:
        return jsonrpc_error(
            request.id,
            INVALID_PARAMS,
            "Invalid params: tools/call requires 'name' and an 'arguments' object",
        )

    try:
        document = await asyncio.wait_for(engine.invoke(call.name, call.arguments), request_timeout)
    except ValidationError as e:
        return jsonrpc_error(request.id, INVALID_PARAMS, str(e))
    except AllEndpointsFailedError as e:
        logger.warning(f"Tool {call.name} failed: {e}")
        return jsonrpc_error(
            request.id,
            SERVER_ERROR,
            str(e),
            data={"failures": [failure.to_dict() for failure in e.failures]},
        )
    except TimeoutError:
        logger.warning(f"Tool {call.name} timed out after {request_timeout}s")
        return jsonrpc_error(request.id, SERVER_ERROR, f"Request timed out after {request_timeout}s")

    result = CallToolResult(
        content=[TextContent(text=json.dumps(document, indent=2, ensure_ascii=False))]
    )
    return jsonrpc_response(request.id, result.model_dump())
