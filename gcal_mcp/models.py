"""
Calendar value types returned in tool ``data`` payloads.

Provider payloads are loosely shaped dicts; the ``from_api`` constructors
project them into these fixed types. ``dump`` produces the camelCase,
null-free dicts that go on the wire.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
  model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

  def dump(self) -> dict[str, Any]:
    return self.model_dump(by_alias=True, exclude_none=True)


def _when(value: dict[str, Any] | None) -> str:
  """Timestamp of an event boundary; all-day events only carry a date."""
  value = value or {}
  return value.get("dateTime") or value.get("date") or ""


class CalendarEvent(_WireModel):
  id: str
  summary: str
  description: str | None = None
  start: str
  end: str
  time_zone: str | None = None
  attendees: list[str] | None = None
  link: str | None = None

  @classmethod
  def from_api(cls, raw: dict[str, Any]) -> CalendarEvent:
    start = raw.get("start") or {}
    attendees = [a["email"] for a in raw.get("attendees") or [] if a.get("email")]
    return cls(
      id=raw.get("id") or "",
      summary=raw.get("summary") or "No title",
      description=raw.get("description") or None,
      start=_when(start),
      end=_when(raw.get("end")),
      time_zone=start.get("timeZone") or None,
      attendees=attendees or None,
      link=raw.get("htmlLink") or None,
    )


class CalendarListEntry(_WireModel):
  id: str
  summary: str
  description: str | None = None
  primary: bool | None = None
  access_role: str | None = None
  time_zone: str | None = None

  @classmethod
  def from_api(cls, raw: dict[str, Any]) -> CalendarListEntry:
    return cls(
      id=raw.get("id") or "",
      summary=raw.get("summary") or "Untitled Calendar",
      description=raw.get("description") or None,
      primary=raw.get("primary") or None,
      access_role=raw.get("accessRole") or None,
      time_zone=raw.get("timeZone") or None,
    )


class FreeBusyInterval(_WireModel):
  start: str
  end: str


class CalendarFreeBusy(_WireModel):
  calendar_id: str
  busy: list[FreeBusyInterval]
