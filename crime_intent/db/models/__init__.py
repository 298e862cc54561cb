"""
SQLAlchemy models for the crime store.

Exposes `Base`, `now_utc` and the ORM classes.
"""

from .base import Base, now_utc  # re-export
from .crime import Crime

__all__ = [
    "Base",
    "now_utc",
    "Crime",
]
