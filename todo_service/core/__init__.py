"""
Core infrastructure components for DynamoDB operations.

- TableGateway: Thin wrapper over keyed boto3 DynamoDB operations
- map_dynamodb_error: ClientError to domain exception mapping
- create_table_gateway: Factory building a gateway from configuration
"""

from .table_gateway import TableGateway, create_table_gateway, map_dynamodb_error

__all__ = [
    "TableGateway",
    "create_table_gateway",
    "map_dynamodb_error",
]
