"""
Input validation for tool parameters.

Each tool has a pydantic model describing its arguments. ``parse_params``
turns raw MCP arguments into a model instance or raises ValidationError
with a readable message; nothing here touches the provider.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Annotated, Any, TypeVar

import pydantic
from pydantic import AfterValidator, BaseModel, ConfigDict, EmailStr, Field, model_validator
from pydantic.alias_generators import to_camel

MAX_RESULTS_LIMIT = 2500
MAX_FREEBUSY_RANGE = timedelta(days=365)

START_BEFORE_END = "Start time must be before end time"


class ValidationError(Exception):
  """Raised when input validation fails."""

  pass


def parse_datetime(value: str) -> datetime:
  """Parse an RFC3339 / ISO-8601 timestamp (a trailing Z is accepted)."""
  return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))


def _comparable(start: datetime, end: datetime) -> tuple[datetime, datetime]:
  # Mixed naive/aware pairs: read the naive side as UTC.
  if (start.tzinfo is None) != (end.tzinfo is None):
    if start.tzinfo is None:
      start = start.replace(tzinfo=timezone.utc)
    else:
      end = end.replace(tzinfo=timezone.utc)
  return start, end


def is_before(start: str, end: str) -> bool:
  a, b = _comparable(parse_datetime(start), parse_datetime(end))
  return a < b


def span(start: str, end: str) -> timedelta:
  a, b = _comparable(parse_datetime(start), parse_datetime(end))
  return b - a


def _check_timestamp(value: str, info: pydantic.ValidationInfo) -> str:
  try:
    parse_datetime(value)
  except ValueError:
    raise ValueError(f"Invalid datetime for {to_camel(info.field_name)}: {value!r}") from None
  return value


Timestamp = Annotated[str, AfterValidator(_check_timestamp)]
EmailList = list[EmailStr]


class _Params(BaseModel):
  model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


# ---------------------------------------------------------------------------
# Per-tool parameter models
# ---------------------------------------------------------------------------


class ListEventsParams(_Params):
  calendar_id: str | None = None
  start: Timestamp | None = None
  end: Timestamp | None = None
  max_results: int | None = Field(default=None, gt=0, le=MAX_RESULTS_LIMIT)
  time_zone: str | None = None

  @model_validator(mode="after")
  def _start_before_end(self) -> ListEventsParams:
    if self.start and self.end and not is_before(self.start, self.end):
      raise ValueError(START_BEFORE_END)
    return self


class SearchEventsParams(_Params):
  calendar_id: str | None = None
  query: str = Field(min_length=1)
  max_results: int | None = Field(default=None, gt=0, le=MAX_RESULTS_LIMIT)
  time_zone: str | None = None


class CreateEventParams(_Params):
  calendar_id: str | None = None
  summary: str = Field(min_length=1)
  description: str | None = None
  start: Timestamp
  end: Timestamp
  time_zone: str | None = None
  attendees: EmailList | None = None

  @model_validator(mode="after")
  def _start_before_end(self) -> CreateEventParams:
    if not is_before(self.start, self.end):
      raise ValueError(START_BEFORE_END)
    return self


# Fields an update may change; presence is read from model_fields_set.
UPDATABLE_FIELDS = ("summary", "description", "start", "end", "attendees", "time_zone")
# Fields that may be explicitly null to clear them on the event.
CLEARABLE_FIELDS = ("description", "attendees")


class UpdateEventParams(_Params):
  calendar_id: str | None = None
  event_id: str = Field(min_length=1)
  summary: str | None = None
  description: str | None = None
  start: Timestamp | None = None
  end: Timestamp | None = None
  time_zone: str | None = None
  attendees: EmailList | None = None

  @model_validator(mode="after")
  def _check_update(self) -> UpdateEventParams:
    present = self.present_fields()
    if not present:
      raise ValueError("At least one field to update must be provided")
    for name in present:
      if name not in CLEARABLE_FIELDS and getattr(self, name) is None:
        raise ValueError(f"{to_camel(name)} cannot be null")
    if self.start and self.end and not is_before(self.start, self.end):
      raise ValueError(START_BEFORE_END)
    return self

  def present_fields(self) -> list[str]:
    """Updatable fields the caller actually supplied, in declaration order."""
    return [name for name in UPDATABLE_FIELDS if name in self.model_fields_set]


class DeleteEventParams(_Params):
  calendar_id: str | None = None
  event_id: str = Field(min_length=1)


class GetFreebusyParams(_Params):
  calendar_ids: str = Field(min_length=1)
  start: Timestamp
  end: Timestamp
  time_zone: str = "UTC"

  @model_validator(mode="after")
  def _check_range(self) -> GetFreebusyParams:
    if not is_before(self.start, self.end):
      raise ValueError(START_BEFORE_END)
    if span(self.start, self.end) > MAX_FREEBUSY_RANGE:
      raise ValueError("Time range cannot exceed 1 year")
    return self

  def calendar_id_list(self) -> list[str]:
    """Comma-separated ids, trimmed, with empty entries dropped."""
    ids = (cid.strip() for cid in self.calendar_ids.split(","))
    return [cid for cid in ids if cid]


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

P = TypeVar("P", bound=BaseModel)


def _format_error(error: dict[str, Any]) -> str:
  msg = str(error.get("msg", "Invalid value"))
  if msg.startswith("Value error, "):
    msg = msg[len("Value error, ") :]
  loc = ".".join(str(part) for part in error.get("loc", ()))
  return f"{loc}: {msg}" if loc else msg


def parse_params(model: type[P], args: dict[str, Any] | None) -> P:
  """Validate raw tool arguments against ``model``."""
  try:
    return model.model_validate(args or {})
  except pydantic.ValidationError as e:
    message = "; ".join(_format_error(err) for err in e.errors())
    raise ValidationError(message) from None
