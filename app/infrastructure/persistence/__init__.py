"""
Relational persistence shared by every bounded context.

Holds the SQLAlchemy engine factory and the ORM table mappings.
"""
