"""Order lifecycle state machine."""
from enum import Enum
from typing import Any, List

from app.core.errors import ValidationError


class OrderStatus(str, Enum):
    """Order statuses, in the order an order normally moves through them."""

    PENDING = "pending"  # Initial status of every new order
    PREPARING = "preparing"
    OUT_FOR_DELIVERY = "out-for-delivery"
    DELIVERED = "delivered"  # Terminal: the order can no longer change

    def __str__(self) -> str:
        """Return the string value of the status."""
        return self.value


INITIAL_STATUS = OrderStatus.PENDING
TERMINAL_STATUSES = frozenset({OrderStatus.DELIVERED})


def allowed_statuses() -> List[str]:
    """Every known status value."""
    return [status.value for status in OrderStatus]


def is_known_status(value: Any) -> bool:
    """Check whether a raw value names a known status."""
    return isinstance(value, str) and value in allowed_statuses()


def is_terminal(status: Any) -> bool:
    """Check whether a status is terminal."""
    return is_known_status(status) and OrderStatus(status) in TERMINAL_STATUSES


def ensure_updatable(current: Any) -> None:
    """Raise if an order in the given status can no longer be changed."""
    if is_terminal(current):
        raise ValidationError("A delivered order cannot be changed")


def ensure_known_status(new: Any) -> None:
    """Raise if a proposed status is not a known status."""
    if not is_known_status(new):
        raise ValidationError(
            f"Order must have a status of {', '.join(allowed_statuses())}"
        )


def ensure_deletable(current: Any) -> None:
    """Raise unless an order in the given status may be deleted."""
    if current != INITIAL_STATUS:
        raise ValidationError("An order cannot be deleted unless it is pending")
