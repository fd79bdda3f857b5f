"""
Application layer for the investments bounded context.

Use cases coordinate domain rules and ports inside a unit of work.
No framework or infrastructure imports allowed.
"""
