"""Order queries."""

from dataclasses import dataclass

from clean_ddd.application.shared import Query


@dataclass(frozen=True)
class GetOrderQuery(Query):
    """Full order state (loaded through the repository)."""

    order_id: str


@dataclass(frozen=True)
class GetOrderSummaryQuery(Query):
    """Denormalized summary з OrderSummaryProjection (eventually consistent)."""

    order_id: str
