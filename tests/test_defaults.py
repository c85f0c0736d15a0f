from __future__ import annotations

from datetime import datetime, timezone

from gcal_mcp.defaults import resolve_calendar_id, resolve_time_zone, resolve_window, to_rfc3339


def test_calendar_id_defaults_to_primary():
  assert resolve_calendar_id(None) == "primary"
  assert resolve_calendar_id("") == "primary"
  assert resolve_calendar_id("team@example.com") == "team@example.com"


async def test_explicit_time_zone_skips_lookup(provider):
  assert await resolve_time_zone("primary", "Asia/Tokyo") == "Asia/Tokyo"
  assert provider.calls == []


async def test_missing_time_zone_reads_calendar(provider):
  assert await resolve_time_zone("primary") == "Europe/Berlin"
  assert provider.call_names() == ["get_calendar"]
  assert provider.last_call("get_calendar") == (("primary",), {})


async def test_calendar_without_zone_falls_back_to_utc(provider):
  provider.calendar_meta = {"id": "primary"}
  assert await resolve_time_zone("primary") == "UTC"


def test_to_rfc3339_normalises_to_utc():
  value = datetime(2025, 3, 1, 12, 30, tzinfo=timezone.utc)
  assert to_rfc3339(value) == "2025-03-01T12:30:00.000Z"


def test_window_defaults_to_thirty_days_from_now():
  now = datetime(2025, 3, 1, tzinfo=timezone.utc)
  assert resolve_window(None, None, now=now) == (
    "2025-03-01T00:00:00.000Z",
    "2025-03-31T00:00:00.000Z",
  )


def test_window_end_follows_explicit_start():
  start, end = resolve_window("2025-06-10T08:00:00Z", None)
  assert start == "2025-06-10T08:00:00Z"
  assert end == "2025-07-10T08:00:00.000Z"


def test_window_keeps_both_bounds_when_given():
  assert resolve_window("2025-06-10T08:00:00Z", "2025-06-11T08:00:00Z") == (
    "2025-06-10T08:00:00Z",
    "2025-06-11T08:00:00Z",
  )
