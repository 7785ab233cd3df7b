"""
db/ - Database Layer
====================
Owns the PostgreSQL connection, the schema, the SQL statement catalog and the
typed error taxonomy. This layer is the lowest in the architecture and has no
dependencies on the layers above it.
"""
