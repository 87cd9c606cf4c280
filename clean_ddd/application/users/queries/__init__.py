"""User queries (read operations)."""

from .user_queries import GetUserQuery, ListUsersQuery, UserQueries

__all__ = ["GetUserQuery", "ListUsersQuery", "UserQueries"]
