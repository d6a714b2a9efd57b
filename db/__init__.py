"""
db/ - Database Layer
====================
Owns the PostgreSQL connection pool and the waitlist schema.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
