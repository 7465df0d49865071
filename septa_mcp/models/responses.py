"""Response models for the SEPTA Transit MCP server."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Server version")
    timestamp: datetime = Field(..., description="Server time")


class ServerInfo(BaseModel):
    """Server identity returned by initialize."""

    name: str
    version: str


class InitializeResult(BaseModel):
    """Result of the initialize method."""

    protocolVersion: str = Field(..., description="MCP protocol revision")
    capabilities: dict = Field(default_factory=lambda: {"tools": {}})
    serverInfo: ServerInfo


class TextContent(BaseModel):
    """Text content block of a tool result."""

    type: Literal["text"] = "text"
    text: str


class CallToolResult(BaseModel):
    """Result of the tools/call method."""

    content: list[TextContent] = Field(default_factory=list)
