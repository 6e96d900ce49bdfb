import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file if it exists
load_dotenv()


class TodoServiceConfig(BaseModel):
    """Configuration for the todo service and its DynamoDB table."""

    aws_access_key_id: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_ACCESS_KEY_ID"),
        description="AWS access key ID"
    )

    aws_secret_access_key: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_SECRET_ACCESS_KEY"),
        description="AWS secret access key"
    )

    region_name: str = Field(
        default_factory=lambda: os.getenv("AWS_REGION", "us-east-1"),
        description="AWS region name"
    )

    # DynamoDB specific settings
    endpoint_url: Optional[str] = Field(
        default_factory=lambda: os.getenv("DYNAMODB_ENDPOINT_URL"),
        description="DynamoDB endpoint URL (for local development)"
    )

    table_name: str = Field(
        default_factory=lambda: os.getenv("DYNAMODB_TABLE", "todos"),
        description="Name of the DynamoDB table holding todo items"
    )

    # Connection settings
    max_pool_connections: int = Field(
        default=10,
        description="Maximum number of connections in the connection pool"
    )

    retries: int = Field(
        default=0,
        ge=0,
        description="SDK retry attempts for failed requests (0 surfaces store failures immediately)"
    )

    timeout_seconds: float = Field(
        default=10.0,
        description="Request timeout in seconds"
    )

    # Logging settings
    log_level: str = Field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"),
        description="Log level for the todo_service loggers"
    )

    enable_debug_logging: bool = Field(
        default_factory=lambda: os.getenv("TODO_DEBUG_LOGGING", "false").lower() == "true",
        description="Enable debug logging for DynamoDB operations"
    )

    @field_validator('region_name')
    @classmethod
    def validate_region(cls, v):
        """Validate AWS region name."""
        if not v:
            raise ValueError("AWS region name is required")
        return v

    @field_validator('table_name')
    @classmethod
    def validate_table_name(cls, v):
        """Validate DynamoDB table name."""
        if not v:
            raise ValueError("DynamoDB table name is required")
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        """Validate and normalize log level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError("Log level must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    @property
    def effective_log_level(self) -> int:
        """Numeric log level, forced to DEBUG when debug logging is enabled."""
        if self.enable_debug_logging:
            return logging.DEBUG
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls) -> 'TodoServiceConfig':
        """Create configuration from environment variables.

        Returns:
            TodoServiceConfig instance
        """
        return cls()

    @classmethod
    def for_local_development(cls, table_name: str = "todos") -> 'TodoServiceConfig':
        """Create configuration for DynamoDB Local.

        Args:
            table_name: Table to use on the local endpoint

        Returns:
            TodoServiceConfig instance configured for local development
        """
        return cls(
            aws_access_key_id="local",
            aws_secret_access_key="local",
            region_name="us-east-1",
            endpoint_url="http://localhost:8000",
            table_name=table_name,
            enable_debug_logging=True
        )

    model_config = ConfigDict(
        validate_assignment=True
    )
