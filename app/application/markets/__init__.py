"""
Application layer for the markets bounded context.

Read-only use cases over orders, trades and trading pairs.
No framework or infrastructure imports allowed.
"""
