"""Task query handlers (read side)."""

from clean_ddd.application.shared import QueryHandler
from clean_ddd.application.tasks.dtos import TaskDTO
from clean_ddd.application.tasks.queries import GetTaskQuery, ListTasksQuery, TaskQueries
from clean_ddd.domain.shared import AggregateNotFound


class GetTaskHandler(QueryHandler[GetTaskQuery, TaskDTO]):
    def __init__(self, queries: TaskQueries) -> None:
        self.queries = queries

    async def handle(self, query: GetTaskQuery) -> TaskDTO:
        task = await self.queries.get(query.task_id)
        if task is None:
            raise AggregateNotFound("Task not found", task_id=query.task_id)
        return task


class ListTasksHandler(QueryHandler[ListTasksQuery, list[TaskDTO]]):
    def __init__(self, queries: TaskQueries) -> None:
        self.queries = queries

    async def handle(self, query: ListTasksQuery) -> list[TaskDTO]:
        if query.user_id is None:
            return await self.queries.list_all()
        return await self.queries.list_by_user(query.user_id)
