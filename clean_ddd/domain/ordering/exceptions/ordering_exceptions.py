"""Exceptions для Ordering bounded context."""

from clean_ddd.domain.shared import (
    BusinessRuleViolation,
    EntityNotFound,
    InvalidStateTransition,
)


class InvalidOrderStateError(InvalidStateTransition):
    """Raised при спробі виконати операцію в невалідному статусі order."""

    pass


class ShippingAddressRequiredError(InvalidOrderStateError):
    """Raised при confirm без адреси доставки."""

    pass


class EmptyOrderError(BusinessRuleViolation):
    """Raised при confirm order без жодного item."""

    pass


class OrderItemNotFoundError(EntityNotFound):
    """Raised коли в order немає рядка для product."""

    pass
