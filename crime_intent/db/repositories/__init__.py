"""
Per-domain store modules for database access.

Functions take an open Session and return ORM rows; conversion to schemas
happens in the caller.
"""
