"""
Calendar provider interface.

Everything the tool layer needs from a calendar backend goes through this
Protocol. Payloads are the provider's raw JSON dicts; projection into the
fixed tool types happens in ``gcal_mcp.models``.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


class ProviderError(Exception):
  """Raised when a provider call fails. ``code`` is the HTTP status."""

  def __init__(self, code: int, message: str) -> None:
    self.code = code
    self.message = message
    super().__init__(message)


@runtime_checkable
class CalendarProvider(Protocol):
  async def list_calendars(self) -> list[dict[str, Any]]: ...

  async def get_calendar(self, calendar_id: str) -> dict[str, Any]: ...

  async def list_events(
    self,
    calendar_id: str,
    *,
    time_min: str | None = None,
    time_max: str | None = None,
    max_results: int | None = None,
    time_zone: str | None = None,
  ) -> list[dict[str, Any]]: ...

  async def search_events(
    self,
    calendar_id: str,
    query: str,
    *,
    max_results: int | None = None,
    time_zone: str | None = None,
  ) -> list[dict[str, Any]]: ...

  async def insert_event(self, calendar_id: str, body: dict[str, Any]) -> dict[str, Any]: ...

  async def patch_event(
    self, calendar_id: str, event_id: str, body: dict[str, Any]
  ) -> dict[str, Any]: ...

  async def delete_event(self, calendar_id: str, event_id: str) -> None: ...

  async def query_freebusy(
    self,
    calendar_ids: list[str],
    time_min: str,
    time_max: str,
    time_zone: str,
  ) -> dict[str, dict[str, Any]]: ...
