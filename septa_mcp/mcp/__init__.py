"""MCP (Model Context Protocol) transport module.

This module contains components for the MCP JSON-RPC transport:
- Tool definitions for tools/list
- JSON-RPC 2.0 helpers
- Request dispatcher (initialize, tools/list, tools/call)
"""

from .jsonrpc import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    SERVER_ERROR,
    jsonrpc_error,
    jsonrpc_response,
)
from .tool_defs import TOOL_DEFINITIONS
from .transport import PROTOCOL_VERSION, SERVER_NAME, handle_mcp_request

__all__ = [
    # Tool definitions
    "TOOL_DEFINITIONS",
    # Dispatcher
    "handle_mcp_request",
    "PROTOCOL_VERSION",
    "SERVER_NAME",
    # JSON-RPC helpers
    "jsonrpc_response",
    "jsonrpc_error",
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
    "SERVER_ERROR",
]
