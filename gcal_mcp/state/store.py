"""
In-process state store for the calendar server.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .types import CalendarState, initial_state

if TYPE_CHECKING:
  from ..client.provider import CalendarProvider

_state: CalendarState = initial_state()


def require_client() -> CalendarProvider:
  """Get calendar client, failing if none has been installed."""
  if _state.client is None:
    raise RuntimeError("Calendar client not initialized")
  return _state.client


def set_client(client: CalendarProvider | None) -> None:
  """Set calendar client."""
  _state.client = client


def reset_state() -> None:
  """Reset state to initial."""
  global _state
  _state = initial_state()
