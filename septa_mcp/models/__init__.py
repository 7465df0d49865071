"""Pydantic models and enums for the SEPTA Transit MCP server.

This module re-exports all models for convenience:

    from septa_mcp.models import ToolName, RequestKind
"""

from .enums import RequestKind, ResponseShape, ToolName
from .requests import JSONRPCRequest, ToolCallParams
from .responses import (
    CallToolResult,
    HealthResponse,
    InitializeResult,
    ServerInfo,
    TextContent,
)

__all__ = [
    # Enums
    "RequestKind",
    "ResponseShape",
    "ToolName",
    # Request models
    "JSONRPCRequest",
    "ToolCallParams",
    # Response models
    "CallToolResult",
    "HealthResponse",
    "InitializeResult",
    "ServerInfo",
    "TextContent",
]
