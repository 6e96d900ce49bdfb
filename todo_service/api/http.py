"""
HTTP-shaped request and response types.

ApiRequest is the subset of an API Gateway REST proxy event the dispatcher
reads; ApiResponse is what it produces. A response may carry the exception
behind a failed outcome on ``error`` so the entry point can log it; the error
never reaches the wire.
"""

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

METHOD_NOT_ALLOWED = "Method Not Allowed"
INVALID_INPUT = "Invalid input"
TODO_NOT_FOUND = "Todo not found"
TASK_CANNOT_BE_EMPTY = "Task cannot be empty"
UPDATE_FAILED = "Update failed"
TODO_UPDATED = "Todo updated successfully!"
TODO_DELETED = "Todo deleted successfully!"

JSON_HEADERS = {"Content-Type": "application/json"}


class ApiRequest(BaseModel):
    """Inbound request: method, path parameters and raw body."""

    http_method: str = Field(..., description="HTTP verb, e.g. POST")
    path_parameters: Dict[str, str] = Field(default_factory=dict, description="Path parameters, 'id' for item routes")
    body: str = Field("", description="Raw request body")

    @property
    def todo_id(self) -> str:
        """The 'id' path parameter, or an empty string when absent."""
        return self.path_parameters.get("id", "")

    @classmethod
    def from_event(cls, event: Mapping[str, Any]) -> 'ApiRequest':
        """
        Build a request from an API Gateway proxy event.

        API Gateway sends null for absent pathParameters and body.
        """
        return cls(
            http_method=event.get("httpMethod") or "",
            path_parameters=event.get("pathParameters") or {},
            body=event.get("body") or "",
        )


class ApiResponse(BaseModel):
    """Outbound response: status code and body, plus the error behind a failure."""

    status_code: int = Field(..., description="HTTP status code")
    body: str = Field("", description="Response body")
    headers: Dict[str, str] = Field(default_factory=dict, description="Response headers")
    error: Optional[Exception] = Field(None, exclude=True, description="Exception behind a failed outcome")

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @classmethod
    def ok(cls, body: str) -> 'ApiResponse':
        return cls(status_code=200, body=body)

    @classmethod
    def ok_json(cls, body: str) -> 'ApiResponse':
        return cls(status_code=200, body=body, headers=dict(JSON_HEADERS))

    @classmethod
    def method_not_allowed(cls) -> 'ApiResponse':
        return cls(status_code=405, body=METHOD_NOT_ALLOWED)

    @classmethod
    def internal_error(cls, error: Exception, body: str = "") -> 'ApiResponse':
        return cls(status_code=500, body=body, error=error)

    def to_dict(self) -> Dict[str, Any]:
        """API Gateway proxy integration response."""
        response: Dict[str, Any] = {
            "statusCode": self.status_code,
            "body": self.body,
        }
        if self.headers:
            response["headers"] = dict(self.headers)
        return response
