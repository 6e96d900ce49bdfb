# Base exception class
from .base import TodoServiceError

from .domain_exceptions import (
    ValidationError,
    ConflictError,
    ConnectionError,
    RetryableError,
)

__all__ = [
    # Base exception
    "TodoServiceError",

    # Domain exceptions (alphabetically ordered)
    "ConflictError",
    "ConnectionError",
    "RetryableError",
    "ValidationError",
]
