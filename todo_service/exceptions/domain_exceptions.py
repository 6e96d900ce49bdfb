"""
Domain-Specific Exceptions for the Todo Service

All exceptions extend TodoServiceError and carry the originating exception
(a botocore ClientError, a pydantic ValidationError, ...) on original_error.

Organized by category:
1. Data Validation Errors
2. Conflict Errors
3. Infrastructure and Retry Errors
"""

from typing import Any, Dict, Optional

from .base import TodoServiceError


# =============================================================================
# Data Validation Errors
# =============================================================================

class ValidationError(TodoServiceError):
    """Raised when data validation fails.

    Used for:
    - Request payloads that are not a JSON object of the expected shape
    - DynamoDB items that cannot be mapped back to a Todo
    - ValidationException responses from DynamoDB (e.g. empty key values)
    """

    def __init__(self, message: str, errors: Optional[Dict[str, Any]] = None, original_error: Optional[Exception] = None):
        """Initialize validation error.

        Args:
            message: Human-readable error message
            errors: Dictionary of field-level validation errors
            original_error: The original exception that caused this error
        """
        self.errors = errors or {}
        context = {}
        if self.errors:
            context['validation_errors'] = self.errors
        super().__init__(message, original_error, context)


# =============================================================================
# Conflict Errors
# =============================================================================

class ConflictError(TodoServiceError):
    """Raised when a todo write collides with a DynamoDB transaction on the same key."""

    def __init__(self, message: str, resource_id: Optional[str] = None, original_error: Optional[Exception] = None):
        """Initialize conflict error.

        Args:
            message: Human-readable error message
            resource_id: ID of the conflicting todo
            original_error: The original exception that caused this error
        """
        self.resource_id = resource_id
        context = {}
        if resource_id:
            context['resource_id'] = resource_id
        super().__init__(message, original_error, context)


# =============================================================================
# Infrastructure and Retry Errors
# =============================================================================

class ConnectionError(TodoServiceError):
    """Raised when DynamoDB cannot be reached or refuses the caller.

    Used for:
    - Network connectivity issues
    - Authentication/authorization failures
    - Missing tables (ResourceNotFoundException)
    - Unclassified DynamoDB error codes
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, original_error, context)


class RetryableError(TodoServiceError):
    """Raised when DynamoDB throttles or is temporarily unavailable.

    The service itself never retries; the caller decides.
    """

    def __init__(self, message: str, retry_after_seconds: Optional[int] = None, original_error: Optional[Exception] = None):
        """Initialize retryable error.

        Args:
            message: Human-readable error message
            retry_after_seconds: Suggested retry delay in seconds
            original_error: The original exception that caused this error
        """
        self.retry_after_seconds = retry_after_seconds
        context = {}
        if retry_after_seconds:
            context['retry_after_seconds'] = retry_after_seconds
        super().__init__(message, original_error, context)
