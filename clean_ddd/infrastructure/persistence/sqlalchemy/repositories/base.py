"""Shared plumbing для SQLAlchemy repositories.

Repositories не роблять flush: зміни чекають в session до
`SQLAlchemyUnitOfWork.commit()`, де flush + commit виконуються разом.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Iterable, Optional, Protocol, TypeVar
from uuid import UUID

from sqlalchemy import inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from clean_ddd.domain.shared import AggregateRoot, ConcurrencyException, DomainEvent
from clean_ddd.infrastructure.persistence.sqlalchemy.models import OutboxMessageModel

TAggregate = TypeVar("TAggregate", bound=AggregateRoot)


class Mapper(Protocol[TAggregate]):
    def to_entity(self, model: Any) -> TAggregate: ...

    def to_model(self, entity: TAggregate) -> Any: ...

    def update_model_from_entity(self, model: Any, entity: TAggregate) -> Any: ...


@dataclass
class StagedAggregate:
    aggregate: AggregateRoot
    model: Any
    original_version: int
    removed: bool = False


class StagedChanges:
    """Aggregates та outbox events staged в одному unit of work.

    Потрібно щоб:
    - повторний save того ж aggregate перевіряв version staged рядка
    - повторний save не дублював outbox messages (dedupe за event_id)
    - rollback повертав aggregate.version до значення перед save
    """

    def __init__(self) -> None:
        self._aggregates: dict[tuple[str, str], StagedAggregate] = {}
        self._event_ids: set[UUID] = set()

    def get(self, table: str, key: str) -> Optional[StagedAggregate]:
        return self._aggregates.get((table, key))

    def track(
        self, table: str, key: str, aggregate: AggregateRoot, model: Any
    ) -> StagedAggregate:
        staged = StagedAggregate(
            aggregate=aggregate, model=model, original_version=aggregate.version
        )
        self._aggregates[(table, key)] = staged
        return staged

    def unseen(self, events: Iterable[DomainEvent]) -> list[DomainEvent]:
        fresh = [event for event in events if event.event_id not in self._event_ids]
        self._event_ids.update(event.event_id for event in fresh)
        return fresh

    def restore_versions(self) -> None:
        for staged in self._aggregates.values():
            staged.aggregate.version = staged.original_version

    def clear(self) -> None:
        self._aggregates = {}
        self._event_ids = set()

    def __bool__(self) -> bool:
        return bool(self._aggregates)


class SQLAlchemyRepository(Generic[TAggregate]):
    """Load/save aggregates через AsyncSession та mapper.

    Note:
        - save: aggregate.version має збігатися з committed version рядка
          (або staged в цьому unit of work), інакше ConcurrencyException
        - рядок отримує version + 1, aggregate.version теж збільшується
        - pending events додаються в outbox в тій самій session
        - commit повторно перевіряє version (UPDATE ... WHERE version = ?)
    """

    model_class: ClassVar[Any]

    def __init__(
        self, session: AsyncSession, staged: StagedChanges, mapper: Mapper[Any]
    ) -> None:
        self._session = session
        self._staged = staged
        self._mapper = mapper

    @property
    def table(self) -> str:
        return self.model_class.__tablename__

    async def _load(self, key: str) -> Optional[TAggregate]:
        staged = self._staged.get(self.table, key)
        if staged is not None:
            return None if staged.removed else self._mapper.to_entity(staged.model)

        model = await self._session.get(self.model_class, key)
        if model is None:
            return None
        return self._mapper.to_entity(model)

    async def _save(self, aggregate: TAggregate) -> None:
        key = str(aggregate.id)
        staged = await self._check_version(key, aggregate)
        await self._check_unique(key, aggregate)

        if staged is not None:
            self._mapper.update_model_from_entity(staged.model, aggregate)
            model = staged.model
        else:
            model = None
            if aggregate.version > 0:
                model = await self._session.get(self.model_class, key)
                if model is not None and model.version != aggregate.version:
                    # identity map тримає старий стан рядка
                    await self._session.refresh(model)
            if model is None:
                model = self._mapper.to_model(aggregate)
                self._session.add(model)
            else:
                self._mapper.update_model_from_entity(model, aggregate)
            self._staged.track(self.table, key, aggregate, model)

        aggregate.version = model.version
        self._stage_events(aggregate)

    async def _remove(self, aggregate: TAggregate) -> None:
        key = str(aggregate.id)
        staged = await self._check_version(key, aggregate)

        if staged is None:
            model = await self._session.get(self.model_class, key)
            if model is None:
                raise ConcurrencyException(
                    "Aggregate is not persisted",
                    table=self.table,
                    aggregate_id=key,
                )
            staged = self._staged.track(self.table, key, aggregate, model)

        if inspect(staged.model).pending:
            self._session.expunge(staged.model)
        else:
            await self._session.delete(staged.model)

        staged.removed = True
        aggregate.version += 1
        self._stage_events(aggregate)

    async def _check_unique(self, key: str, aggregate: TAggregate) -> None:
        """Hook для unique constraints (раннє AggregateAlreadyExists)."""

    async def _check_version(
        self, key: str, aggregate: TAggregate
    ) -> Optional[StagedAggregate]:
        staged = self._staged.get(self.table, key)
        if staged is not None and staged.removed:
            raise ConcurrencyException(
                "Aggregate already removed in this unit of work",
                table=self.table,
                aggregate_id=key,
            )

        if staged is not None:
            current = staged.model.version
        else:
            stmt = select(self.model_class.version).where(self.model_class.id == key)
            current = await self._session.scalar(stmt) or 0

        if aggregate.version != current:
            raise ConcurrencyException(
                "Aggregate was modified by another transaction",
                table=self.table,
                aggregate_id=key,
                expected_version=aggregate.version,
                actual_version=current,
            )
        return staged

    def _stage_events(self, aggregate: TAggregate) -> None:
        for event in self._staged.unseen(aggregate.pending_events()):
            self._session.add(OutboxMessageModel.from_event(event))
