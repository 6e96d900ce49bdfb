"""
Todo CQRS APIs

Read API:
- Point lookup by id (GetItem)

Write API:
- Create with a minted id (PutItem)
- Partial task update (UpdateItem)
- Delete by id (DeleteItem)

Usage:
    gateway = create_table_gateway(config)
    read_api = TodoReadApi(config, gateway)
    write_api = TodoWriteApi(config, gateway)
"""

from .queries import TodoReadApi
from .commands import TodoWriteApi, generate_todo_id

__all__ = [
    "TodoReadApi",
    "TodoWriteApi",
    "generate_todo_id",
]
