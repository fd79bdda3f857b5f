"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer: SQLAlchemy persistence and the
background maturity scheduler.
"""
