"""
Test configuration and fixtures for the todo service.

Provides a configuration pointing at a moto-backed DynamoDB table, the
read/write APIs and dispatcher built on top of it, and mocks for unit tests.
"""

from unittest.mock import Mock

import boto3
import pytest
from moto import mock_aws

from todo_service import (
    TodoReadApi,
    TodoRequestDispatcher,
    TodoServiceConfig,
    TodoWriteApi,
    create_table_gateway,
)

TEST_TABLE = "test_todos"


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Keep tests away from real AWS credentials and profiles."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.delenv("DYNAMODB_ENDPOINT_URL", raising=False)


@pytest.fixture
def todo_config():
    """Configuration for mocked testing."""
    return TodoServiceConfig(
        aws_access_key_id="test_key",
        aws_secret_access_key="test_secret",
        region_name="us-east-1",
        endpoint_url=None,  # Use default AWS endpoint for moto
        table_name=TEST_TABLE,
    )


@pytest.fixture
def mock_dynamodb_resource():
    """Mock DynamoDB resource."""
    with mock_aws():
        yield boto3.resource('dynamodb', region_name='us-east-1')


@pytest.fixture
def todos_table(mock_dynamodb_resource):
    """Create the todo table for testing."""
    return mock_dynamodb_resource.create_table(
        TableName=TEST_TABLE,
        KeySchema=[
            {'AttributeName': 'id', 'KeyType': 'HASH'}
        ],
        AttributeDefinitions=[
            {'AttributeName': 'id', 'AttributeType': 'S'}
        ],
        BillingMode='PAY_PER_REQUEST'
    )


@pytest.fixture
def table_gateway(todo_config, todos_table):
    """Table gateway backed by the mocked todo table."""
    return create_table_gateway(todo_config)


@pytest.fixture
def todo_read_api(todo_config, table_gateway):
    """Todo read API with mocked DynamoDB."""
    return TodoReadApi(todo_config, table_gateway)


@pytest.fixture
def todo_write_api(todo_config, table_gateway):
    """Todo write API with mocked DynamoDB."""
    return TodoWriteApi(todo_config, table_gateway)


@pytest.fixture
def dispatcher(todo_read_api, todo_write_api):
    """Dispatcher wired to the mocked todo table."""
    return TodoRequestDispatcher(todo_read_api, todo_write_api)


@pytest.fixture
def mock_gateway():
    """Mock table gateway for unit testing."""
    gateway = Mock()
    gateway.table_name = TEST_TABLE
    gateway.get_item.return_value = None
    gateway.update_item.return_value = {'task': 'updated'}
    gateway.delete_item.return_value = None
    return gateway


@pytest.fixture
def sample_todo_item():
    """Sample stored todo item."""
    return {
        "id": "0f8fad5b-d9cb-469f-a165-70867728950e",
        "task": "buy milk",
    }


def make_event(method, todo_id=None, body=None):
    """Build a minimal API Gateway REST proxy event."""
    return {
        "httpMethod": method,
        "path": "/todos" if todo_id is None else f"/todos/{todo_id}",
        "pathParameters": None if todo_id is None else {"id": todo_id},
        "body": body,
        "headers": {"Content-Type": "application/json"},
        "isBase64Encoded": False,
    }


@pytest.fixture
def event_factory():
    """Factory for API Gateway proxy events."""
    return make_event
