"""Per-request pipeline context."""
from typing import Any, Dict

from pydantic import BaseModel


class RequestContext(BaseModel):
    """Scratch record shared by the stages of one request."""

    entity_name: str  # "Dish" or "Order", used in error messages
    params: Dict[str, str] = {}  # Route parameters
    data: Dict[str, Any] = {}  # The request body's "data" object
    values: Dict[str, Any] = {}  # Validated values written by stages

    def get(self, name: str, default: Any = None) -> Any:
        """Get a validated value."""
        return self.values.get(name, default)

    def set(self, name: str, value: Any) -> None:
        """Store a validated value."""
        self.values[name] = value
