"""
Utility modules for the LightBnB data access layer.
"""

from .exceptions import (
    DataAccessError,
    ConstraintViolationError,
    MalformedInputError,
)
from .query_builder import Clause, SelectQuery
from .validators import (
    coerce_int,
    coerce_limit,
    to_minor_units,
    validate_schema,
)

__all__ = [
    # Exceptions
    "DataAccessError",
    "ConstraintViolationError",
    "MalformedInputError",
    
    # Query assembly
    "Clause",
    "SelectQuery",
    
    # Coercion
    "coerce_int",
    "coerce_limit",
    "to_minor_units",
    "validate_schema",
]
