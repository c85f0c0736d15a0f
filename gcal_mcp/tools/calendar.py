"""
Calendar management tools (1 tool).
"""

from __future__ import annotations

from mcp.types import Tool

calendar_tools: list[Tool] = [
  Tool(
    name="list_calendars",
    description="List all available Google Calendars",
    inputSchema={
      "type": "object",
      "properties": {},
    },
  ),
]
