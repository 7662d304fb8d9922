"""Validation pipelines for order operations."""
from app.services.orders.repository import OrderRepository
from app.services.orders.stages import (
    DishQuantityValid,
    DishesNonEmptyList,
    LineItemShape,
    OrderDeletable,
    OrderStatusValidForUpdate,
)
from app.services.pipeline.pipeline import Pipeline
from app.services.pipeline.stages import (
    EntityExists,
    FieldPresence,
    NonEmptyString,
    RouteBodyIdMatch,
)

ROUTE_PARAM = "orderId"


def _order_exists(repository: OrderRepository) -> EntityExists:
    return EntityExists(repository.get_by_id, route_param=ROUTE_PARAM, store_as="order")


def create_pipeline() -> Pipeline:
    return Pipeline(
        "order.create",
        [
            FieldPresence("deliverTo"),
            FieldPresence("mobileNumber"),
            FieldPresence("dishes"),
            NonEmptyString("deliverTo"),
            NonEmptyString("mobileNumber"),
            DishesNonEmptyList(),
            LineItemShape(),
            DishQuantityValid(),
        ],
    )


def read_pipeline(repository: OrderRepository) -> Pipeline:
    return Pipeline("order.read", [_order_exists(repository)])


def update_pipeline(repository: OrderRepository) -> Pipeline:
    return Pipeline(
        "order.update",
        [
            _order_exists(repository),
            RouteBodyIdMatch(ROUTE_PARAM),
            FieldPresence("deliverTo"),
            FieldPresence("mobileNumber"),
            FieldPresence("status"),
            FieldPresence("dishes"),
            NonEmptyString("deliverTo"),
            NonEmptyString("mobileNumber"),
            OrderStatusValidForUpdate(),
            DishesNonEmptyList(),
            LineItemShape(),
            DishQuantityValid(),
        ],
    )


def delete_pipeline(repository: OrderRepository) -> Pipeline:
    return Pipeline("order.delete", [_order_exists(repository), OrderDeletable()])
