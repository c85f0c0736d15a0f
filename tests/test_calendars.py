from __future__ import annotations

import re

import pytest

from gcal_mcp.client.provider import ProviderError
from gcal_mcp.handlers import utility
from gcal_mcp.handlers.calendar import list_calendars
from gcal_mcp.handlers.utility import get_current_time, local_zone_name
from gcal_mcp.helpers import UNAUTHORIZED_MESSAGE, ToolExecutionError


async def test_list_calendars(provider):
  provider.calendars = [
    {
      "id": "me@example.com",
      "summary": "Me",
      "primary": True,
      "accessRole": "owner",
      "timeZone": "Europe/Berlin",
    },
    {"id": "team@example.com", "description": "Shared", "accessRole": "reader"},
  ]

  result = await list_calendars({})

  assert result.text == (
    "Found 2 calendars:\n\n"
    "• me@example.com (Primary)\n  Me [owner]\n\n"
    "• team@example.com\n  Untitled Calendar - Shared [reader]"
  )
  assert result.data == {
    "calendars": [
      {
        "id": "me@example.com",
        "summary": "Me",
        "primary": True,
        "accessRole": "owner",
        "timeZone": "Europe/Berlin",
      },
      {
        "id": "team@example.com",
        "summary": "Untitled Calendar",
        "description": "Shared",
        "accessRole": "reader",
      },
    ]
  }


async def test_list_calendars_empty(provider):
  result = await list_calendars({})

  assert result.text == "No calendars found in your account."
  assert result.data == {"calendars": []}


async def test_list_calendars_unauthorized(provider):
  provider.errors["list_calendars"] = ProviderError(401, "Invalid Credentials")

  result = await list_calendars({})

  assert result.text == UNAUTHORIZED_MESSAGE


async def test_list_calendars_failure_raises(provider):
  provider.errors["list_calendars"] = ProviderError(500, "Backend Error")

  with pytest.raises(ToolExecutionError, match="Failed to list calendars: Backend Error"):
    await list_calendars({})


async def test_get_current_time(provider, monkeypatch):
  monkeypatch.setenv("TZ", "America/New_York")

  result = await get_current_time({})

  assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", result.data["iso"])
  assert result.data["timeZone"] == "America/New_York"
  assert result.text == f"Current time: {result.data['iso']} (America/New_York)"
  assert provider.calls == []


def test_local_zone_from_localtime_link(monkeypatch, tmp_path):
  zone_file = tmp_path / "zoneinfo" / "Europe" / "Lisbon"
  zone_file.parent.mkdir(parents=True)
  zone_file.write_bytes(b"")
  link = tmp_path / "localtime"
  link.symlink_to(zone_file)

  monkeypatch.delenv("TZ", raising=False)
  monkeypatch.setattr(utility, "LOCALTIME_PATH", link)

  assert local_zone_name() == "Europe/Lisbon"


def test_local_zone_from_tz_file_path(monkeypatch, tmp_path):
  zone_file = tmp_path / "zoneinfo" / "Asia" / "Tokyo"
  zone_file.parent.mkdir(parents=True)
  zone_file.write_bytes(b"")
  link = tmp_path / "localtime"
  link.symlink_to(zone_file)

  monkeypatch.setenv("TZ", f":{link}")

  assert local_zone_name() == "Asia/Tokyo"


def test_local_zone_from_unresolvable_tz_file_path(monkeypatch, tmp_path):
  monkeypatch.setenv("TZ", f":{tmp_path / 'nowhere'}")

  assert local_zone_name() == "UTC"


def test_local_zone_falls_back_to_utc(monkeypatch, tmp_path):
  monkeypatch.delenv("TZ", raising=False)
  monkeypatch.setattr(utility, "LOCALTIME_PATH", tmp_path / "missing")

  assert local_zone_name() == "UTC"
