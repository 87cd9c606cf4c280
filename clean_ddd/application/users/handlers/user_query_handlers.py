"""User query handlers (read side)."""

from clean_ddd.application.shared import QueryHandler
from clean_ddd.application.users.dtos import UserDTO
from clean_ddd.application.users.queries import GetUserQuery, ListUsersQuery, UserQueries
from clean_ddd.domain.shared import AggregateNotFound


class GetUserHandler(QueryHandler[GetUserQuery, UserDTO]):
    def __init__(self, queries: UserQueries) -> None:
        self.queries = queries

    async def handle(self, query: GetUserQuery) -> UserDTO:
        user = await self.queries.get(query.user_id)
        if user is None:
            raise AggregateNotFound("User not found", user_id=query.user_id)
        return user


class ListUsersHandler(QueryHandler[ListUsersQuery, list[UserDTO]]):
    def __init__(self, queries: UserQueries) -> None:
        self.queries = queries

    async def handle(self, query: ListUsersQuery) -> list[UserDTO]:
        return await self.queries.list_all()
