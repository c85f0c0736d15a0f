"""
Process-wide server state.
"""
