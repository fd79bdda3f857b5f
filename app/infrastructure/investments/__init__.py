"""
Infrastructure adapters for the investments bounded context.

Each adapter implements a domain port (ABC) on top of a SQLAlchemy
session owned by the unit of work.
"""
