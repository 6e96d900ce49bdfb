"""
Thin DynamoDB Table Gateway

This module provides a lightweight wrapper around a boto3 DynamoDB Table
resource. It exposes only the keyed primitives the todo service needs:

- get_item: point lookup by primary key
- put_item: unconditional overwrite of a whole item
- update_item: partial update through an UpdateExpression
- delete_item: delete by primary key

The gateway owns:
- Creating the boto3 session/resource once and reusing it across invocations
- Mapping botocore ClientErrors to domain exceptions
- Logging successful writes

Callers receive raw DynamoDB dictionaries; turning them into models is the
job of the read/write APIs.
"""

import logging
from typing import Any, Dict, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from ..config import TodoServiceConfig
from ..exceptions import (
    ConnectionError,
    ConflictError,
    ValidationError,
    RetryableError
)

logger = logging.getLogger(__name__)


def map_dynamodb_error(
    error: ClientError,
    operation: str,
    table_name: str,
    resource_id: Optional[str] = None
) -> Exception:
    """Map DynamoDB ClientError to domain-specific exceptions.

    Args:
        error: The boto3 ClientError
        operation: The operation that failed (e.g., "GetItem", "PutItem")
        table_name: The DynamoDB table name
        resource_id: Optional todo id for context

    Returns:
        Appropriate domain exception
    """
    error_code = error.response['Error']['Code']
    error_message = error.response['Error']['Message']

    context = f"{operation} on {table_name}"
    if resource_id:
        context += f" (resource: {resource_id})"

    full_message = f"{context}: {error_message}"

    if error_code == 'ResourceNotFoundException':
        # Missing items are empty results, so on item operations this always means the table
        return ConnectionError(f"Table not found - {full_message}", original_error=error)

    elif error_code == 'ValidationException':
        return ValidationError(f"Validation failed - {full_message}", original_error=error)

    elif error_code == 'ItemCollectionSizeLimitExceededException':
        return ValidationError(f"Item collection size limit exceeded - {full_message}", original_error=error)

    elif error_code == 'TransactionConflictException':
        # A plain item write can collide with an in-flight transaction on the same key
        return ConflictError(f"Conflicting transaction - {full_message}", resource_id, original_error=error)

    elif error_code in [
        'ProvisionedThroughputExceededException', 'RequestLimitExceeded',
        'ThrottlingException', 'TooManyRequestsException'
    ]:
        return RetryableError(f"Throttling - {full_message}", original_error=error)

    elif error_code in [
        'InternalServerError', 'ServiceUnavailable', 'ServiceUnavailableException',
        'RequestTimeoutException'
    ]:
        return RetryableError(f"Service unavailable - {full_message}", original_error=error)

    elif error_code in ['UnrecognizedClientException', 'AccessDeniedException']:
        return ConnectionError(f"Authentication/authorization failed - {full_message}", original_error=error)

    elif error_code in ['ExpiredTokenException', 'InvalidSignatureException', 'IncompleteSignatureException']:
        return ConnectionError(f"Invalid or expired credentials - {full_message}", original_error=error)

    # Default to ConnectionError for unknown errors
    logger.warning(f"Unknown DynamoDB error code '{error_code}' mapped to ConnectionError")
    return ConnectionError(f"DynamoDB operation failed - {full_message}", original_error=error)


class TableGateway:
    """
    Thin gateway for keyed operations on a single DynamoDB table.

    The boto3 resource is created lazily on first use and then reused, so a
    gateway built once per process serves every invocation.
    """

    key_attribute = 'id'

    def __init__(self, config: TodoServiceConfig, table_name: str):
        """Initialize table gateway.

        Args:
            config: Service configuration
            table_name: Name of the DynamoDB table
        """
        self.config = config
        self.table_name = table_name
        self._dynamodb = None
        self._table = None

    @property
    def dynamodb(self):
        """Lazy initialization of DynamoDB resource."""
        if self._dynamodb is None:
            try:
                session = boto3.Session(
                    aws_access_key_id=self.config.aws_access_key_id,
                    aws_secret_access_key=self.config.aws_secret_access_key,
                    region_name=self.config.region_name
                )

                dynamodb_config = {
                    'region_name': self.config.region_name
                }

                if self.config.endpoint_url:
                    dynamodb_config['endpoint_url'] = self.config.endpoint_url

                boto_config = Config(
                    retries={'max_attempts': self.config.retries},
                    max_pool_connections=self.config.max_pool_connections,
                    read_timeout=self.config.timeout_seconds,
                    connect_timeout=self.config.timeout_seconds
                )
                dynamodb_config['config'] = boto_config

                self._dynamodb = session.resource('dynamodb', **dynamodb_config)
            except Exception as e:
                logger.error(f"Failed to create DynamoDB resource: {e}")
                raise ConnectionError(f"Failed to connect to DynamoDB: {e}", e) from e
        return self._dynamodb

    @property
    def table(self):
        """Get boto3 DynamoDB Table resource."""
        if self._table is None:
            try:
                self._table = self.dynamodb.Table(self.table_name)
            except Exception as e:
                logger.error(f"Failed to access table '{self.table_name}': {e}")
                raise ConnectionError(f"Failed to access table '{self.table_name}': {e}", e) from e
        return self._table

    def _resource_id(self, key_or_item: Dict[str, Any]) -> Optional[str]:
        return key_or_item.get(self.key_attribute)

    def get_item(self, key: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Point lookup by primary key (eventually consistent).

        Args:
            key: Primary key of the item

        Returns:
            The raw item, or None when no item has that key
        """
        try:
            response = self.table.get_item(Key=key)
            logger.debug(f"Got item from {self.table_name}: {key}")
            return response.get('Item')
        except ClientError as e:
            raise map_dynamodb_error(e, "GetItem", self.table_name, self._resource_id(key)) from e
        except BotoCoreError as e:
            logger.error(f"GetItem on {self.table_name} failed before reaching DynamoDB: {e}")
            raise ConnectionError(f"GetItem on {self.table_name} failed: {e}", original_error=e) from e

    def put_item(self, item: Dict[str, Any]) -> None:
        """
        Put item into DynamoDB table.

        There is no condition: an existing item with the same key is overwritten.

        Args:
            item: Item to store
        """
        try:
            self.table.put_item(Item=item)
            logger.info(f"Put item in {self.table_name}: {item}")
        except ClientError as e:
            raise map_dynamodb_error(e, "PutItem", self.table_name, self._resource_id(item)) from e
        except BotoCoreError as e:
            logger.error(f"PutItem on {self.table_name} failed before reaching DynamoDB: {e}")
            raise ConnectionError(f"PutItem on {self.table_name} failed: {e}", original_error=e) from e

    def update_item(
        self,
        key: Dict[str, Any],
        update_expression: str,
        expression_attribute_values: Optional[Dict[str, Any]] = None,
        expression_attribute_names: Optional[Dict[str, str]] = None,
        return_values: str = 'NONE'
    ) -> Optional[Dict[str, Any]]:
        """
        Update item in DynamoDB table.

        UpdateItem without a condition creates the item when the key is unknown.

        Args:
            key: Primary key of item to update
            update_expression: UPDATE expression
            expression_attribute_values: Values for update expression
            expression_attribute_names: Names for update expression
            return_values: What to return after update

        Returns:
            Attributes reported by DynamoDB, None when return_values is 'NONE'
        """
        try:
            update_kwargs = {
                'Key': key,
                'UpdateExpression': update_expression,
                'ReturnValues': return_values
            }

            if expression_attribute_values:
                update_kwargs['ExpressionAttributeValues'] = expression_attribute_values
            if expression_attribute_names:
                update_kwargs['ExpressionAttributeNames'] = expression_attribute_names

            response = self.table.update_item(**update_kwargs)
            logger.info(f"Updated item in {self.table_name}: {key}")

            return response.get('Attributes')

        except ClientError as e:
            raise map_dynamodb_error(e, "UpdateItem", self.table_name, self._resource_id(key)) from e
        except BotoCoreError as e:
            logger.error(f"UpdateItem on {self.table_name} failed before reaching DynamoDB: {e}")
            raise ConnectionError(f"UpdateItem on {self.table_name} failed: {e}", original_error=e) from e

    def delete_item(self, key: Dict[str, Any]) -> None:
        """
        Delete item from DynamoDB table.

        DynamoDB reports success whether or not the key existed.

        Args:
            key: Primary key of item to delete
        """
        try:
            self.table.delete_item(Key=key)
            logger.info(f"Deleted item from {self.table_name}: {key}")
        except ClientError as e:
            raise map_dynamodb_error(e, "DeleteItem", self.table_name, self._resource_id(key)) from e
        except BotoCoreError as e:
            logger.error(f"DeleteItem on {self.table_name} failed before reaching DynamoDB: {e}")
            raise ConnectionError(f"DeleteItem on {self.table_name} failed: {e}", original_error=e) from e


def create_table_gateway(config: TodoServiceConfig, table_name: Optional[str] = None) -> TableGateway:
    """
    Factory function to create a TableGateway instance.

    Args:
        config: Service configuration
        table_name: Table name override (defaults to config.table_name)

    Returns:
        Configured TableGateway instance
    """
    return TableGateway(config, table_name or config.table_name)
