"""
Todo Read API

Point lookups against the todo table. There are no list or query
operations: every read is a GetItem on the primary key.
"""

import logging
from typing import Optional

from ...config import TodoServiceConfig
from ...core import TableGateway, create_table_gateway
from ...models import TableMeta, Todo

logger = logging.getLogger(__name__)


class TodoReadApi:
    """
    Read-only API for todo items.

    Store failures surface as domain exceptions from the gateway; a missing
    item is a normal outcome and returns None.
    """

    def __init__(self, config: TodoServiceConfig, gateway: Optional[TableGateway] = None):
        """Initialize read API with configuration and an optional shared gateway."""
        self.config = config
        self.gateway = gateway or create_table_gateway(config)

    def get_by_id(self, todo_id: str) -> Optional[Todo]:
        """
        Get a todo by id.

        DynamoDB Operation: GetItem with primary key

        Args:
            todo_id: Todo identifier

        Returns:
            Todo if found, None otherwise

        Raises:
            ValidationError: Stored item cannot be mapped to a Todo
            ConnectionError, RetryableError: DynamoDB failure
        """
        item = self.gateway.get_item({TableMeta.partition_key: todo_id})

        if item is None:
            logger.debug(f"Todo not found: {todo_id}")
            return None

        return Todo.from_dynamodb_item(item)
