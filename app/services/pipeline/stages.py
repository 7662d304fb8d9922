"""Generic validation stages.

A stage inspects the request context and either returns (continue) or raises
an ApiError (fail). Stages may write validated values into the context but
never touch a repository's contents.
"""
import math
from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Optional

from app.core.errors import NotFoundError, ValidationError
from app.services.pipeline.context import RequestContext


def is_present(value: Any) -> bool:
    """Truthiness as a JSON client sees it: empty arrays and objects count."""
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return len(value) > 0
    return True


def is_positive_integer(value: Any) -> bool:
    """Check for an integer > 0. Integral floats count, booleans do not."""
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return value.is_integer() and value > 0
    return isinstance(value, int) and value > 0


class Stage(ABC):
    """One step of a validation pipeline."""

    @property
    def name(self) -> str:
        """Stage name used in logs."""
        return type(self).__name__

    @abstractmethod
    async def validate(self, context: RequestContext) -> None:
        """Return to continue, raise an ApiError to fail."""
        pass


class FieldPresence(Stage):
    """Require a truthy value for a field of the request data."""

    def __init__(self, field: str):
        self.field = field

    @property
    def name(self) -> str:
        return f"FieldPresence({self.field})"

    async def validate(self, context: RequestContext) -> None:
        value = context.data.get(self.field)
        if not is_present(value):
            raise ValidationError(f"{context.entity_name} must include a {self.field}")
        context.set(self.field, value)


class NonEmptyString(Stage):
    """Require a validated field to be a non-empty string."""

    def __init__(self, field: str):
        self.field = field

    @property
    def name(self) -> str:
        return f"NonEmptyString({self.field})"

    async def validate(self, context: RequestContext) -> None:
        value = context.get(self.field)
        if not isinstance(value, str) or not value:
            raise ValidationError(f"{context.entity_name} must include a {self.field}")


class PositiveInteger(Stage):
    """Require a validated field to be an integer greater than 0."""

    def __init__(self, field: str):
        self.field = field

    @property
    def name(self) -> str:
        return f"PositiveInteger({self.field})"

    async def validate(self, context: RequestContext) -> None:
        if not is_positive_integer(context.get(self.field)):
            raise ValidationError(
                f"{context.entity_name} must have a {self.field} "
                f"that is an integer greater than 0"
            )


class RouteBodyIdMatch(Stage):
    """Require the body id, when given, to equal the route id."""

    def __init__(self, route_param: str, body_field: str = "id"):
        self.route_param = route_param
        self.body_field = body_field

    async def validate(self, context: RequestContext) -> None:
        route_id = context.params.get(self.route_param)
        body_id = context.data.get(self.body_field)
        if not is_present(body_id):
            return
        if str(body_id) != route_id:
            raise ValidationError(
                f"{context.entity_name} id does not match route id. "
                f"{context.entity_name}: {body_id}, Route: {route_id}"
            )


class EntityExists(Stage):
    """Resolve the route-addressed entity, or fail with 404."""

    def __init__(
        self,
        lookup: Callable[[str], Awaitable[Optional[Any]]],
        route_param: str,
        store_as: str,
    ):
        self.lookup = lookup
        self.route_param = route_param
        self.store_as = store_as

    async def validate(self, context: RequestContext) -> None:
        entity_id = context.params.get(self.route_param, "")
        entity = await self.lookup(entity_id)
        if entity is None:
            raise NotFoundError(f"{context.entity_name} does not exist: {entity_id}")
        context.set(self.store_as, entity)
