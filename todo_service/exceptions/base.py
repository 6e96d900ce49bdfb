"""
Root of the todo service exception tree.

A TodoServiceError has two audiences:
- ``message`` is written for API clients and goes into response bodies
  verbatim (the "Update failed: <message>" body)
- ``original_error`` is the boto3/botocore or pydantic exception behind it
  and only ever reaches the logs, through ``str()``
"""

from typing import Any, Dict, Optional


class TodoServiceError(Exception):
    """Base exception for all todo service errors."""

    def __init__(self, message: str, original_error: Optional[Exception] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error
        self.context = dict(context or {})

    @property
    def dynamodb_error_code(self) -> Optional[str]:
        """Error code of a wrapped botocore ClientError, None for any other cause."""
        response = getattr(self.original_error, 'response', None)
        if not isinstance(response, dict):
            return None
        return response.get('Error', {}).get('Code')

    def __str__(self) -> str:
        """Log form: message, then context, then the wrapped exception type."""
        text = self.message
        if self.context:
            text += " [" + ", ".join(f"{k}={v}" for k, v in self.context.items()) + "]"
        if self.original_error is not None:
            cause = type(self.original_error).__name__
            if self.dynamodb_error_code:
                cause += f" {self.dynamodb_error_code}"
            text += f" (caused by {cause})"
        return text
