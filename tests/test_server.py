"""End-to-end tool calls through an in-memory MCP session."""

from __future__ import annotations

from mcp.shared.memory import create_connected_server_and_client_session

from gcal_mcp.client.provider import ProviderError
from gcal_mcp.server import create_mcp_server


async def test_lists_every_tool(provider):
  async with create_connected_server_and_client_session(create_mcp_server()) as client:
    result = await client.list_tools()

  assert sorted(tool.name for tool in result.tools) == [
    "create_event",
    "delete_event",
    "edit_event",
    "get_current_time",
    "get_freebusy",
    "list_calendars",
    "list_events",
    "search_events",
    "update_event",
  ]


async def test_call_returns_text_and_structured_data(provider):
  async with create_connected_server_and_client_session(create_mcp_server()) as client:
    result = await client.call_tool("delete_event", {"eventId": "evt-1"})

  assert not result.isError
  assert result.content[0].text == "Event deleted successfully: evt-1 from calendar 'primary'"
  assert result.structuredContent == {"calendarId": "primary", "eventId": "evt-1", "deleted": True}


async def test_validation_failure_is_an_error_result(provider):
  async with create_connected_server_and_client_session(create_mcp_server()) as client:
    result = await client.call_tool("update_event", {"eventId": "evt-1"})

  assert result.isError
  assert "At least one field to update must be provided" in result.content[0].text
  assert provider.calls == []


async def test_unclassified_provider_failure_is_an_error_result(provider):
  provider.errors["delete_event"] = ProviderError(500, "Backend Error")

  async with create_connected_server_and_client_session(create_mcp_server()) as client:
    result = await client.call_tool("delete_event", {"eventId": "evt-1"})

  assert result.isError
  assert "Failed to delete event: Backend Error" in result.content[0].text


async def test_classified_failure_is_a_normal_result(provider):
  provider.errors["delete_event"] = ProviderError(404, "Not Found")

  async with create_connected_server_and_client_session(create_mcp_server()) as client:
    result = await client.call_tool("delete_event", {"eventId": "gone"})

  assert not result.isError
  assert result.content[0].text == "Event or calendar not found: gone in primary"
