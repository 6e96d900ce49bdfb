"""
Handler Layer for the Todo Service

Application-layer read and write APIs following Command Query Responsibility
Segregation. Each domain has its own subdirectory with queries.py (read) and
commands.py (write).

Architecture:
api/ -> handlers/ (this layer) -> core/ (infrastructure) -> DynamoDB
handlers/ (this layer) <- models/ (domain models)
"""

from .todos.queries import TodoReadApi
from .todos.commands import TodoWriteApi

__all__ = [
    'TodoReadApi',
    'TodoWriteApi',
]
