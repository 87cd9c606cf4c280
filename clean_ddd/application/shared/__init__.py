"""Shared Application Layer components."""

from .command import Command
from .event_publisher import EventHandler, EventPublisher, EventSubscriber
from .handler import CommandHandler, QueryHandler
from .query import Query
from .unit_of_work import UnitOfWork

__all__ = [
    "Command",
    "Query",
    "CommandHandler",
    "QueryHandler",
    "UnitOfWork",
    "EventPublisher",
    "EventSubscriber",
    "EventHandler",
]
