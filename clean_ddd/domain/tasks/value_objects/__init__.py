"""Value objects для Tasks bounded context."""

from .identifiers import TaskId

__all__ = ["TaskId"]
