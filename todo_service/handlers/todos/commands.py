"""
Todo Write API

Mutations of the todo table:
- create: PutItem without a condition (overwrite semantics)
- update_task: UpdateItem setting only the task attribute
- delete: DeleteItem without a condition

No existence checks and no optimistic locking: concurrent writers to the same
id resolve as last-writer-wins inside DynamoDB.
"""

import logging
import uuid
from typing import Any, Callable, Dict, Optional

from ...config import TodoServiceConfig
from ...core import TableGateway, create_table_gateway
from ...models import TableMeta, Todo, TodoCreate

logger = logging.getLogger(__name__)


def generate_todo_id() -> str:
    """Mint a new todo id (UUID4 string)."""
    return str(uuid.uuid4())


class TodoWriteApi:
    """
    Write-only API for todo mutations.

    The id factory is injected so that callers (and tests) control how ids
    are minted.
    """

    def __init__(
        self,
        config: TodoServiceConfig,
        gateway: Optional[TableGateway] = None,
        id_factory: Callable[[], str] = generate_todo_id
    ):
        """Initialize write API with configuration, shared gateway and id factory."""
        self.config = config
        self.gateway = gateway or create_table_gateway(config)
        self.id_factory = id_factory

    def create(self, todo_data: TodoCreate) -> Todo:
        """
        Create a todo with a freshly minted id.

        DynamoDB Operation: PutItem without ConditionExpression

        Args:
            todo_data: Parsed create payload

        Returns:
            The stored Todo, including its id

        Raises:
            ValidationError: Todo cannot be mapped to a DynamoDB item
            ConnectionError, RetryableError: DynamoDB failure
        """
        todo = todo_data.to_todo(self.id_factory())
        item = todo.to_dynamodb_item()

        self.gateway.put_item(item)
        logger.info(f"Created todo: {todo.id}")
        return todo

    def update_task(self, todo_id: str, task: str) -> Optional[Dict[str, Any]]:
        """
        Replace the task of a todo.

        DynamoDB Operation: UpdateItem "set #N = :n" with ReturnValues=UPDATED_NEW.
        No condition is attached, so an unknown id results in a new item
        holding only id and task.

        Args:
            todo_id: Todo identifier
            task: New task text

        Returns:
            Attributes reported by DynamoDB after the update

        Raises:
            ValidationError, ConnectionError, RetryableError: DynamoDB failure
        """
        attributes = self.gateway.update_item(
            key={TableMeta.partition_key: todo_id},
            update_expression="set #N = :n",
            expression_attribute_values={':n': task},
            expression_attribute_names={'#N': 'task'},
            return_values='UPDATED_NEW'
        )
        logger.info(f"Updated todo task: {todo_id}")
        return attributes

    def delete(self, todo_id: str) -> None:
        """
        Delete a todo.

        DynamoDB Operation: DeleteItem without ConditionExpression; deleting
        an unknown id succeeds.

        Args:
            todo_id: Todo identifier

        Raises:
            ValidationError, ConnectionError, RetryableError: DynamoDB failure
        """
        self.gateway.delete_item(key={TableMeta.partition_key: todo_id})
        logger.info(f"Deleted todo: {todo_id}")
