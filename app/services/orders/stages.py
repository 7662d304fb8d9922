"""Order-specific validation stages."""
from app.core.errors import ValidationError
from app.services.orders import lifecycle
from app.services.pipeline.context import RequestContext
from app.services.pipeline.stages import Stage, is_positive_integer


class DishesNonEmptyList(Stage):
    """Require the order's dishes to be a non-empty list."""

    async def validate(self, context: RequestContext) -> None:
        dishes = context.get("dishes")
        if not isinstance(dishes, list) or not dishes:
            raise ValidationError("Order must include at least one dish")


class LineItemShape(Stage):
    """Require every line item to be an object with a string dishId, if any."""

    async def validate(self, context: RequestContext) -> None:
        for index, item in enumerate(context.get("dishes")):
            if not isinstance(item, dict):
                raise ValidationError(f"Dish {index} must be an object")
            dish_id = item.get("dishId")
            if dish_id is not None and not isinstance(dish_id, str):
                raise ValidationError(f"Dish {index} must have a dishId that is a string")


class DishQuantityValid(Stage):
    """Require every line item quantity to be a positive integer."""

    async def validate(self, context: RequestContext) -> None:
        dishes = context.get("dishes")
        offender = next(
            (
                index
                for index, item in enumerate(dishes)
                if not is_positive_integer(item.get("quantity"))
            ),
            -1,
        )
        if offender != -1:
            raise ValidationError(
                f"Dish {offender} must have a quantity that is an integer greater than 0"
            )


class OrderStatusValidForUpdate(Stage):
    """
    Gate an update on the order lifecycle.

    The stored order must not be delivered, and the proposed status must be
    a known one. Checked in that order.
    """

    async def validate(self, context: RequestContext) -> None:
        order = context.get("order")
        lifecycle.ensure_updatable(order.status)
        lifecycle.ensure_known_status(context.get("status"))


class OrderDeletable(Stage):
    """Require the stored order to still be pending."""

    async def validate(self, context: RequestContext) -> None:
        lifecycle.ensure_deletable(context.get("order").status)
