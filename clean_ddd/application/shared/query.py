"""Base Query class для CQRS pattern.

Query - запит на отримання даних (read operation).
Queries НЕ мають side effects (не змінюють дані).
"""

from abc import ABC
from dataclasses import dataclass


@dataclass(frozen=True)
class Query(ABC):
    """Base class для всіх queries.

    Query характеристики:
    - **Read-only**: Не змінює дані, тільки читає
    - **Read side**: списки та фільтри (tasks користувача) живуть тут,
      а не в repository aggregate

    Example:
        >>> @dataclass(frozen=True)
        ... class ListTasksQuery(Query):
        ...     user_id: str | None = None

        >>> tasks = await handler.handle(ListTasksQuery(user_id="u-1"))
    """

    pass
