"""
Pydantic schemas for caller input validation.
"""

from .user import UserCreate
from .property import PropertyCreate, PropertySearchOptions

__all__ = [
    "UserCreate",
    "PropertyCreate",
    "PropertySearchOptions",
]
