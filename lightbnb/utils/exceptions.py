"""
Custom exception classes for the LightBnB data access layer.
Provides structured errors with stable error codes for the host application to map.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional, List


class DataAccessError(Exception):
    """Base data access exception class."""
    
    def __init__(self, detail: str, error_code: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        self.error_code = error_code or "DATA_ACCESS_ERROR"
    
    def to_dict(self) -> Dict[str, Any]:
        """
        Format the error in a consistent structure.
        
        Returns:
            Dictionary with code, message and timestamp under an "error" key
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.detail,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        }


class ConstraintViolationError(DataAccessError):
    """Raised when the store rejects a statement for an integrity constraint."""
    
    def __init__(self, detail: str, constraint: Optional[str] = None):
        super().__init__(detail, error_code="CONSTRAINT_VIOLATION")
        self.constraint = constraint
    
    def to_dict(self) -> Dict[str, Any]:
        response = super().to_dict()
        if self.constraint:
            response["error"]["constraint"] = self.constraint
        return response


class MalformedInputError(DataAccessError):
    """Raised before any round trip when caller input cannot be coerced."""
    
    def __init__(
        self,
        detail: str,
        field_errors: Optional[List[Dict[str, str]]] = None
    ):
        super().__init__(detail, error_code="MALFORMED_INPUT")
        self.field_errors = field_errors or []
    
    def to_dict(self) -> Dict[str, Any]:
        response = super().to_dict()
        if self.field_errors:
            response["error"]["details"] = self.field_errors
        return response
