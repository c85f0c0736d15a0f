"""
Calendar state types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
  from ..client.provider import CalendarProvider


@dataclass
class CalendarState:
  """In-memory state for the calendar server."""

  client: CalendarProvider | None = None


def initial_state() -> CalendarState:
  """Create initial state."""
  return CalendarState()
