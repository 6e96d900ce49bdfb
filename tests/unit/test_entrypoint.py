"""
Tests for the Lambda entry point and the HTTP request/response types.
"""

import logging
import os
from unittest.mock import Mock, patch

import pytest
from botocore.exceptions import ClientError

from todo_service.api import entrypoint
from todo_service.api.http import ApiRequest, ApiResponse
from todo_service.exceptions import ConnectionError, RetryableError, ValidationError


@pytest.fixture
def stub_dispatcher(monkeypatch):
    """Replace the process-wide dispatcher with a mock."""
    dispatcher = Mock()
    monkeypatch.setattr(entrypoint, "_dispatcher", dispatcher)
    return dispatcher


@pytest.fixture
def reset_dispatcher(monkeypatch):
    """Start without a cached dispatcher."""
    monkeypatch.setattr(entrypoint, "_dispatcher", None)


class TestApiRequest:
    """Test building requests from API Gateway events."""

    def test_from_event(self, event_factory):
        request = ApiRequest.from_event(event_factory("PUT", "abc", '{"task": "x"}'))

        assert request.http_method == "PUT"
        assert request.path_parameters == {"id": "abc"}
        assert request.todo_id == "abc"
        assert request.body == '{"task": "x"}'

    def test_from_event_with_nulls(self, event_factory):
        request = ApiRequest.from_event(event_factory("GET"))

        assert request.path_parameters == {}
        assert request.todo_id == ""
        assert request.body == ""

    def test_from_empty_event(self):
        request = ApiRequest.from_event({})

        assert request.http_method == ""


class TestApiResponse:
    """Test response conversion."""

    def test_to_dict_plain(self):
        assert ApiResponse.ok("Todo deleted successfully!").to_dict() == {
            "statusCode": 200,
            "body": "Todo deleted successfully!",
        }

    def test_to_dict_json(self):
        assert ApiResponse.ok_json('{"id": "a", "task": "b"}').to_dict() == {
            "statusCode": 200,
            "body": '{"id": "a", "task": "b"}',
            "headers": {"Content-Type": "application/json"},
        }

    def test_error_not_serialized(self):
        response = ApiResponse.internal_error(ConnectionError("boom"))

        assert response.to_dict() == {"statusCode": 500, "body": ""}
        assert "error" not in response.model_dump()

    def test_method_not_allowed(self):
        response = ApiResponse.method_not_allowed()

        assert (response.status_code, response.body) == (405, "Method Not Allowed")


class TestLambdaHandler:
    """Test the Lambda entry point."""

    def test_dispatches_event(self, stub_dispatcher, event_factory):
        stub_dispatcher.dispatch.return_value = ApiResponse(status_code=404, body="Todo not found")

        result = entrypoint.lambda_handler(event_factory("GET", "abc"), None)

        assert result == {"statusCode": 404, "body": "Todo not found"}
        request = stub_dispatcher.dispatch.call_args[0][0]
        assert request == ApiRequest(http_method="GET", path_parameters={"id": "abc"}, body="")

    def test_server_errors_logged_with_traceback(self, stub_dispatcher, event_factory):
        failure = ConnectionError("DeleteItem on todos failed")
        stub_dispatcher.dispatch.return_value = ApiResponse.internal_error(failure)

        with patch.object(entrypoint, "logger") as mock_logger:
            result = entrypoint.lambda_handler(event_factory("DELETE", "abc"), None)

        assert result == {"statusCode": 500, "body": ""}
        mock_logger.error.assert_called_once_with(
            "DELETE failed with 500: DeleteItem on todos failed",
            exc_info=failure,
        )

    def test_dynamodb_cause_logged_but_not_returned(self, stub_dispatcher, event_factory):
        throttled = ClientError({'Error': {'Code': 'ThrottlingException', 'Message': 'Rate exceeded'}}, 'UpdateItem')
        failure = RetryableError("Throttling - UpdateItem on todos: Rate exceeded", original_error=throttled)
        stub_dispatcher.dispatch.return_value = ApiResponse.internal_error(failure, body=f"Update failed: {failure.message}")

        with patch.object(entrypoint, "logger") as mock_logger:
            result = entrypoint.lambda_handler(event_factory("PUT", "abc", '{"task": "x"}'), None)

        assert result["body"] == "Update failed: Throttling - UpdateItem on todos: Rate exceeded"
        mock_logger.error.assert_called_once_with(
            "PUT failed with 500: Throttling - UpdateItem on todos: Rate exceeded "
            "(caused by ClientError ThrottlingException)",
            exc_info=failure,
        )

    def test_client_errors_logged_as_warning(self, stub_dispatcher, event_factory):
        failure = ValidationError("__root__: Invalid JSON")
        stub_dispatcher.dispatch.return_value = ApiResponse(status_code=400, body="Invalid input", error=failure)

        with patch.object(entrypoint, "logger") as mock_logger:
            entrypoint.lambda_handler(event_factory("POST", body="{"), None)

        mock_logger.warning.assert_called_once_with("POST rejected with 400: __root__: Invalid JSON")
        mock_logger.error.assert_not_called()

    def test_dispatcher_built_once(self, reset_dispatcher):
        env = {"AWS_REGION": "eu-central-1", "DYNAMODB_TABLE": "todos-prod"}

        with patch.dict(os.environ, env):
            first = entrypoint.get_dispatcher()
            second = entrypoint.get_dispatcher()

        assert first is second
        assert first.read_api.gateway.table_name == "todos-prod"
        assert first.read_api.gateway.config.region_name == "eu-central-1"

    def test_dispatcher_configures_logging(self, reset_dispatcher):
        with patch.dict(os.environ, {"LOG_LEVEL": "WARNING", "TODO_DEBUG_LOGGING": "false"}):
            entrypoint.get_dispatcher()

        assert logging.getLogger("todo_service").level == logging.WARNING
