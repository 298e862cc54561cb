"""
Pydantic schemas for crime records.
"""

from .crime import CrimeBase, Crime

__all__ = [
    "CrimeBase",
    "Crime",
]
