"""
HTTP layer: request/response types, the method router and the Lambda entry point.
"""

from .http import ApiRequest, ApiResponse
from .dispatcher import TodoRequestDispatcher
from .entrypoint import lambda_handler

__all__ = [
    "ApiRequest",
    "ApiResponse",
    "TodoRequestDispatcher",
    "lambda_handler",
]
