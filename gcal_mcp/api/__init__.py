"""
Provider API layer: thin async wrappers over the active CalendarProvider.
"""
