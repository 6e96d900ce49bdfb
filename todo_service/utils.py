"""
Utility functions for the todo service.

Logging is plain standard-library logging: every module owns
``logger = logging.getLogger(__name__)`` under the ``todo_service``
namespace, and configure_logging sets the level for all of them at once.
"""

import logging

from .config import TodoServiceConfig

PACKAGE_LOGGER = "todo_service"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(config: TodoServiceConfig) -> logging.Logger:
    """Apply the configured level to the package logger.

    Inside Lambda the runtime has already attached a handler to the root
    logger; elsewhere (local runs, scripts) a stream handler is installed.

    Args:
        config: Service configuration

    Returns:
        The package logger
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(config.effective_log_level)

    if config.enable_debug_logging:
        # botocore request/response logging is very chatty at DEBUG
        logging.getLogger("botocore").setLevel(logging.INFO)

    return package_logger
