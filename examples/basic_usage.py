#!/usr/bin/env python3
"""
Basic usage example for the todo service.

Walks one todo through its lifecycle against DynamoDB Local
(http://localhost:8000) by feeding API Gateway proxy events to the
dispatcher, the same way the Lambda entry point does:
1. Setting up configuration and logging
2. Creating the table if it does not exist yet
3. Create, read, update and delete requests
"""

import json

from todo_service import ApiRequest, TodoRequestDispatcher, TodoServiceConfig
from todo_service.utils import configure_logging


def ensure_table(config: TodoServiceConfig):
    """Create the todos table on DynamoDB Local when it is missing."""
    import boto3

    dynamodb = boto3.resource(
        'dynamodb',
        region_name=config.region_name,
        endpoint_url=config.endpoint_url,
        aws_access_key_id=config.aws_access_key_id,
        aws_secret_access_key=config.aws_secret_access_key,
    )
    existing = [table.name for table in dynamodb.tables.all()]
    if config.table_name in existing:
        return

    table = dynamodb.create_table(
        TableName=config.table_name,
        KeySchema=[{'AttributeName': 'id', 'KeyType': 'HASH'}],
        AttributeDefinitions=[{'AttributeName': 'id', 'AttributeType': 'S'}],
        BillingMode='PAY_PER_REQUEST',
    )
    table.wait_until_exists()
    print(f"Created table {config.table_name}")


def send(dispatcher: TodoRequestDispatcher, event: dict) -> dict:
    response = dispatcher.dispatch(ApiRequest.from_event(event)).to_dict()
    print(f"{event['httpMethod']:<6} -> {response['statusCode']} {response['body']}")
    return response


def main():
    """Demonstrate a todo lifecycle."""

    # 1. Configure connection and logging
    print("1. Setting up configuration...")
    config = TodoServiceConfig.for_local_development()
    # In Lambda the configuration comes from the environment:
    # config = TodoServiceConfig.from_env()
    configure_logging(config)

    # 2. Make sure the table exists
    print("2. Checking table...")
    ensure_table(config)

    dispatcher = TodoRequestDispatcher.from_config(config)

    # 3. Create and read
    print("3. Creating a todo...")
    created = send(dispatcher, {"httpMethod": "POST", "body": json.dumps({"task": "buy milk"})})
    todo_id = json.loads(created["body"])["id"]
    send(dispatcher, {"httpMethod": "GET", "pathParameters": {"id": todo_id}})

    # 4. Update, including a rejected empty task
    print("4. Updating the todo...")
    send(dispatcher, {"httpMethod": "PUT", "pathParameters": {"id": todo_id}, "body": '{"task": "buy oat milk"}'})
    send(dispatcher, {"httpMethod": "PUT", "pathParameters": {"id": todo_id}, "body": '{"task": ""}'})
    send(dispatcher, {"httpMethod": "GET", "pathParameters": {"id": todo_id}})

    # 5. Delete
    print("5. Deleting the todo...")
    send(dispatcher, {"httpMethod": "DELETE", "pathParameters": {"id": todo_id}})
    send(dispatcher, {"httpMethod": "GET", "pathParameters": {"id": todo_id}})


if __name__ == "__main__":
    main()
