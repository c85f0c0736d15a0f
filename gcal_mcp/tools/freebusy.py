"""
Free/busy tools (1 tool).
"""

from __future__ import annotations

from mcp.types import Tool

freebusy_tools: list[Tool] = [
  Tool(
    name="get_freebusy",
    description="Get free/busy information for one or more calendars",
    inputSchema={
      "type": "object",
      "properties": {
        "calendarIds": {
          "type": "string",
          "minLength": 1,
          "description": "Comma-separated list of calendar IDs to check for free/busy times (max 50)",
        },
        "start": {
          "type": "string",
          "description": "RFC3339 start datetime for the free/busy query",
        },
        "end": {
          "type": "string",
          "description": "RFC3339 end datetime for the free/busy query (at most 1 year after start)",
        },
        "timeZone": {
          "type": "string",
          "description": "IANA timezone for the query; defaults to UTC",
          "default": "UTC",
        },
      },
      "required": ["calendarIds", "start", "end"],
    },
  ),
]
