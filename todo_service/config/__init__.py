from .config import TodoServiceConfig

__all__ = ["TodoServiceConfig"]
