"""
Custom exception classes for the block catalogue.

AWS and STS failures are not wrapped: they reach the caller as the SDK's own
exceptions.
"""
from typing import Any, List, Optional


class UnknownBlockError(Exception):
    """Exception raised when a block key is not in the catalogue."""

    def __init__(self, message: str, block_key: Optional[str] = None):
        """
        Initialize unknown block error.

        Args:
            message: Error message
            block_key: Requested block key if available
        """
        super().__init__(message)
        self.message = message
        self.block_key = block_key


class ValidationError(Exception):
    """Exception raised for invalid block input."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        missing: Optional[List[str]] = None
    ):
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation if available
            value: Invalid value if available
            missing: Required fields that were not supplied
        """
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value
        self.missing = missing or []
