# Base mixins
from .base import (
    DynamoDBMixin,
    JsonPayloadMixin,
)

# Todo domain
from .todo import (
    TableMeta,
    Todo,
    TodoCreate,
    TodoTaskUpdate,
)

__all__ = [
    # Base mixins
    "DynamoDBMixin",
    "JsonPayloadMixin",

    # Todo domain
    "TableMeta",
    "Todo",
    "TodoCreate",
    "TodoTaskUpdate",
]
