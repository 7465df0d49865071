"""SEPTA Transit MCP Server.

Real-time vehicle locations, detours and alerts for SEPTA services,
exposed as MCP tools over JSON-RPC 2.0.
"""

__version__ = "2.0.0"
