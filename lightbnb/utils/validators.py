"""
Coercion helpers applied to caller input before parameter binding.
Non-numeric values for numeric fields raise MalformedInputError instead of reaching the store.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Mapping, Type, TypeVar, Union

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from lightbnb.utils.exceptions import MalformedInputError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

_int_adapter = TypeAdapter(int)


def format_validation_errors(
    exception: PydanticValidationError,
    field_name: str = None
) -> List[Dict[str, str]]:
    """
    Flatten pydantic errors into field/message pairs.
    
    Args:
        exception: Pydantic validation error
        field_name: Name to report when the error has no location (bare type adapters)
        
    Returns:
        List of {"field", "message"} dictionaries
    """
    details = []
    for error in exception.errors():
        field_path = " -> ".join(str(loc) for loc in error["loc"]) or field_name or "value"
        details.append({"field": field_path, "message": error["msg"]})
    return details


def validate_schema(schema: Type[SchemaT], data: Union[SchemaT, Mapping[str, Any]]) -> SchemaT:
    """
    Validate caller data against a pydantic schema.
    
    Args:
        schema: Pydantic model class
        data: Mapping of raw values, or an already validated instance
        
    Returns:
        Validated schema instance
        
    Raises:
        MalformedInputError: If any field cannot be coerced
    """
    if isinstance(data, schema):
        return data
    try:
        return schema.model_validate(data or {})
    except PydanticValidationError as e:
        field_errors = format_validation_errors(e)
        fields = ", ".join(error["field"] for error in field_errors)
        raise MalformedInputError(f"Invalid {schema.__name__}: {fields}", field_errors) from e


def coerce_int(value: Any, field_name: str) -> int:
    """Coerce an id or count to int, raising MalformedInputError on failure."""
    try:
        return _int_adapter.validate_python(value)
    except PydanticValidationError as e:
        raise MalformedInputError(
            f"{field_name} must be an integer",
            format_validation_errors(e, field_name)
        ) from e


def coerce_limit(limit: Any) -> int:
    """Coerce a result limit to int; range checks are left to the store."""
    try:
        return _int_adapter.validate_python(limit)
    except PydanticValidationError as e:
        raise MalformedInputError(
            "limit must be an integer",
            format_validation_errors(e, "limit")
        ) from e


def to_minor_units(amount: Decimal) -> int:
    """Convert a major currency amount (dollars) to integer minor units (cents)."""
    return int((Decimal(amount) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
