"""
Todo Service

Create, read, update and delete todo items stored in DynamoDB, served through
an AWS Lambda function behind API Gateway. Built on boto3 and Pydantic with
separate read and write APIs over a thin table gateway.
"""

from .config import TodoServiceConfig
from .exceptions import (
    ConflictError,
    ConnectionError,
    RetryableError,
    TodoServiceError,
    ValidationError,
)
from .models import (
    Todo,
    TodoCreate,
    TodoTaskUpdate,
)
from .core import (
    TableGateway,
    create_table_gateway,
)
from .handlers import (
    TodoReadApi,
    TodoWriteApi,
)
from .api import (
    ApiRequest,
    ApiResponse,
    TodoRequestDispatcher,
    lambda_handler,
)

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "TodoServiceConfig",

    # Exceptions
    "ConflictError",
    "ConnectionError",
    "RetryableError",
    "TodoServiceError",
    "ValidationError",

    # Models
    "Todo",
    "TodoCreate",
    "TodoTaskUpdate",

    # TableGateway architecture
    "TableGateway",
    "create_table_gateway",

    # CQRS APIs
    "TodoReadApi",
    "TodoWriteApi",

    # HTTP layer
    "ApiRequest",
    "ApiResponse",
    "TodoRequestDispatcher",
    "lambda_handler",
]
