"""
Todo Request Dispatcher

Routes an ApiRequest to one of four operation handlers by HTTP verb and maps
each outcome to an ApiResponse:

    POST   -> create
    GET    -> read
    PUT    -> update
    DELETE -> delete

Every outcome caused by an exception (unparseable payload, item mapping
failure, store failure) carries that exception on ApiResponse.error, for all
four operations. Outcomes that are plain decisions (unknown verb, missing
todo, empty task) carry no error.
"""

import logging
from typing import Callable, Dict, Optional

from ..config import TodoServiceConfig
from ..core import create_table_gateway
from ..exceptions import TodoServiceError, ValidationError
from ..handlers import TodoReadApi, TodoWriteApi
from ..handlers.todos import generate_todo_id
from ..models import TodoCreate, TodoTaskUpdate
from .http import (
    INVALID_INPUT,
    TASK_CANNOT_BE_EMPTY,
    TODO_DELETED,
    TODO_NOT_FOUND,
    TODO_UPDATED,
    UPDATE_FAILED,
    ApiRequest,
    ApiResponse,
)

logger = logging.getLogger(__name__)

Handler = Callable[[ApiRequest], ApiResponse]

ROUTES: Dict[str, str] = {
    "POST": "create",
    "GET": "read",
    "PUT": "update",
    "DELETE": "delete",
}


class TodoRequestDispatcher:
    """
    Stateless dispatcher for todo CRUD requests.

    Holds only the read/write APIs it was given; nothing is kept between
    requests.
    """

    def __init__(self, read_api: TodoReadApi, write_api: TodoWriteApi):
        self.read_api = read_api
        self.write_api = write_api

    @classmethod
    def from_config(
        cls,
        config: TodoServiceConfig,
        id_factory: Callable[[], str] = generate_todo_id
    ) -> 'TodoRequestDispatcher':
        """Build a dispatcher whose read and write APIs share one table gateway."""
        gateway = create_table_gateway(config)
        return cls(
            TodoReadApi(config, gateway),
            TodoWriteApi(config, gateway, id_factory=id_factory),
        )

    def route(self, http_method: str) -> Optional[Handler]:
        """Return the handler for a verb, or None when the verb is not supported."""
        name = ROUTES.get(http_method)
        if name is None:
            return None
        return getattr(self, name)

    def dispatch(self, request: ApiRequest) -> ApiResponse:
        handler = self.route(request.http_method)
        if handler is None:
            logger.debug(f"Rejected method {request.http_method!r}")
            return ApiResponse.method_not_allowed()
        return handler(request)

    def create(self, request: ApiRequest) -> ApiResponse:
        """Create a todo from the request body; any id in the body is replaced."""
        try:
            payload = TodoCreate.from_json_body(request.body)
        except ValidationError as e:
            return ApiResponse(status_code=400, body=INVALID_INPUT, error=e)

        try:
            todo = self.write_api.create(payload)
            body = todo.to_json()
        except TodoServiceError as e:
            return ApiResponse.internal_error(e)

        return ApiResponse.ok_json(body)

    def read(self, request: ApiRequest) -> ApiResponse:
        """Fetch the todo named by the id path parameter."""
        try:
            todo = self.read_api.get_by_id(request.todo_id)
        except TodoServiceError as e:
            return ApiResponse.internal_error(e)

        if todo is None:
            return ApiResponse(status_code=404, body=TODO_NOT_FOUND)

        try:
            body = todo.to_json()
        except TodoServiceError as e:
            return ApiResponse.internal_error(e)

        return ApiResponse.ok_json(body)

    def update(self, request: ApiRequest) -> ApiResponse:
        """Replace the task of the todo named by the id path parameter."""
        try:
            payload = TodoTaskUpdate.from_json_body(request.body)
        except ValidationError as e:
            return ApiResponse(status_code=400, body=f"{INVALID_INPUT}: {e.message}", error=e)

        if payload.is_empty:
            return ApiResponse(status_code=400, body=TASK_CANNOT_BE_EMPTY)

        try:
            self.write_api.update_task(request.todo_id, payload.task)
        except TodoServiceError as e:
            return ApiResponse.internal_error(e, body=f"{UPDATE_FAILED}: {e.message}")

        return ApiResponse.ok(TODO_UPDATED)

    def delete(self, request: ApiRequest) -> ApiResponse:
        """Delete the todo named by the id path parameter; unknown ids succeed."""
        try:
            self.write_api.delete(request.todo_id)
        except TodoServiceError as e:
            return ApiResponse.internal_error(e)

        return ApiResponse.ok(TODO_DELETED)
