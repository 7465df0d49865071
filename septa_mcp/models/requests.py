"""Request models for the MCP JSON-RPC transport."""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class JSONRPCRequest(BaseModel):
    """JSON-RPC 2.0 request envelope."""

    jsonrpc: str = Field(..., description="Protocol version, must be '2.0'")
    method: str = Field(..., description="Method to invoke")
    params: dict[str, Any] | None = Field(default=None, description="Method parameters")
    id: str | int | None = Field(default=None, description="Request ID (absent for notifications)")


class ToolCallParams(BaseModel):
    """Parameters for the tools/call method."""

    name: str = Field(..., min_length=1, description="Tool to execute")
    arguments: dict[str, Any] = Field(default_factory=dict, description="Tool arguments")

    @field_validator("arguments", mode="before")
    @classmethod
    def null_arguments_as_empty(cls, value: Any) -> Any:
        """Treat ``"arguments": null`` as no arguments."""
        return {} if value is None else value
