"""Validation pipelines for dish operations."""
from app.services.dishes.repository import DishRepository
from app.services.pipeline.pipeline import Pipeline
from app.services.pipeline.stages import (
    EntityExists,
    FieldPresence,
    NonEmptyString,
    PositiveInteger,
    RouteBodyIdMatch,
    Stage,
)

ROUTE_PARAM = "dishId"
REQUIRED_FIELDS = ("name", "description", "price", "image_url")


def _dish_exists(repository: DishRepository) -> EntityExists:
    return EntityExists(repository.get_by_id, route_param=ROUTE_PARAM, store_as="dish")


def _field_checks() -> list[Stage]:
    """Presence of every field, then the shape of each."""
    return [
        *(FieldPresence(field) for field in REQUIRED_FIELDS),
        NonEmptyString("name"),
        NonEmptyString("description"),
        NonEmptyString("image_url"),
        PositiveInteger("price"),
    ]


def create_pipeline() -> Pipeline:
    return Pipeline("dish.create", _field_checks())


def read_pipeline(repository: DishRepository) -> Pipeline:
    return Pipeline("dish.read", [_dish_exists(repository)])


def update_pipeline(repository: DishRepository) -> Pipeline:
    return Pipeline(
        "dish.update",
        [
            _dish_exists(repository),
            *_field_checks(),
            RouteBodyIdMatch(ROUTE_PARAM),
        ],
    )


def delete_pipeline(repository: DishRepository) -> Pipeline:
    return Pipeline("dish.delete", [_dish_exists(repository)])
