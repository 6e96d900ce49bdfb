"""
AWS Lambda entry point.

Handler: ``todo_service.api.entrypoint.lambda_handler``

The dispatcher (and with it the boto3 resource) is built once per process on
the first invocation after a cold start and reused by every later invocation.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from ..config import TodoServiceConfig
from ..utils import configure_logging
from .dispatcher import TodoRequestDispatcher
from .http import ApiRequest, ApiResponse

logger = logging.getLogger(__name__)

_dispatcher: Optional[TodoRequestDispatcher] = None


def get_dispatcher() -> TodoRequestDispatcher:
    """Return the process-wide dispatcher, building it from the environment on first use."""
    global _dispatcher
    if _dispatcher is None:
        config = TodoServiceConfig.from_env()
        configure_logging(config)
        _dispatcher = TodoRequestDispatcher.from_config(config)
        logger.info(f"Todo dispatcher ready for table {config.table_name} in {config.region_name}")
    return _dispatcher


def log_outcome(request: ApiRequest, response: ApiResponse) -> None:
    """Log the exception attached to a failed response."""
    if response.error is None:
        return
    if response.status_code >= 500:
        logger.error(
            f"{request.http_method} failed with {response.status_code}: {response.error}",
            exc_info=response.error,
        )
    else:
        logger.warning(f"{request.http_method} rejected with {response.status_code}: {response.error}")


def lambda_handler(event: Mapping[str, Any], context: Any) -> Dict[str, Any]:
    """Handle an API Gateway proxy event."""
    request = ApiRequest.from_event(event)
    logger.debug(f"Received {request.http_method} request (id={request.todo_id!r})")

    response = get_dispatcher().dispatch(request)
    log_outcome(request, response)
    return response.to_dict()
