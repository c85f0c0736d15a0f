"""
Utility tools (1 tool).
"""

from __future__ import annotations

from mcp.types import Tool

utility_tools: list[Tool] = [
  Tool(
    name="get_current_time",
    description="Get current time and timezone",
    inputSchema={
      "type": "object",
      "properties": {},
    },
  ),
]
