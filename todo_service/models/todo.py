"""
Todo Domain Models

- Todo: the stored record, identified by a service-assigned id
- TodoCreate: write DTO for POST bodies
- TodoTaskUpdate: write DTO for PUT bodies

The id on a Todo is always minted by the service. Payload DTOs ignore any
client-supplied id, and task emptiness is only enforced on update.
"""

from pydantic import BaseModel, ConfigDict, Field

from .base import DynamoDBMixin, JsonPayloadMixin


class TableMeta:
    """Key layout of the todo table."""
    partition_key: str = 'id'


class Todo(DynamoDBMixin, BaseModel):
    """Core domain model for a todo item."""

    id: str = Field(..., description="Service-assigned unique identifier")
    task: str = Field("", description="Free-form text describing the todo")

    model_config = ConfigDict(extra='ignore')


class TodoCreate(JsonPayloadMixin, BaseModel):
    """
    Payload for creating a todo.

    An empty task is accepted. Fields other than task, including id, are
    dropped during parsing.
    """

    task: str = Field("", description="Task text of the new todo")

    model_config = ConfigDict(extra='ignore')

    def to_todo(self, todo_id: str) -> Todo:
        """Build the stored record with a freshly minted id."""
        return Todo(id=todo_id, task=self.task)


class TodoTaskUpdate(JsonPayloadMixin, BaseModel):
    """
    Payload for replacing the task of an existing todo.

    The id comes from the request path; an id in the body is ignored. A
    null or missing task counts as empty.
    """

    task: str = Field("", description="Replacement task text")

    model_config = ConfigDict(extra='ignore')

    @property
    def is_empty(self) -> bool:
        return self.task == ""
