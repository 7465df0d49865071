"""MCP Tool Definitions for SEPTA Transit.

This module contains all tool definitions returned by the tools/list method.
Each tool definition includes the schema for its input parameters.
"""

from ..models.enums import ToolName

TOOL_DEFINITIONS: list[dict] = [
    {
        "name": ToolName.GET_BUS_LOCATIONS.value,
        "description": "Get real-time locations for all vehicles on a specific SEPTA route using the TransitView API. Returns vehicle positions, directions, labels, and destinations.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "route": {
                    "type": "string",
                    "description": 'The route number (e.g., "23", "33", "45", "G"). Use official SEPTA route numbers.',
                },
            },
            "required": ["route"],
        },
    },
    {
        "name": ToolName.GET_BUS_DETOURS.value,
        "description": "Check for active detours on a specific SEPTA route using the Bus Detours API.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "route": {
                    "type": "string",
                    "description": "The route number to check for detours (e.g., '23', '45')",
                },
            },
            "required": ["route"],
        },
    },
    {
        "name": ToolName.GET_TRANSIT_ALERTS.value,
        "description": "Get general system alerts and advisories for SEPTA services using the Alerts API.",
        "inputSchema": {
            "type": "object",
            "properties": {},
        },
    },
]
