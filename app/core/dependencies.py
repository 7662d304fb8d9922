"""FastAPI dependencies."""
import json
import logging
from typing import Any, Dict

from fastapi import Request

from app.core.config import Settings
from app.core.errors import ValidationError
from app.services.dishes.repository import DishRepository
from app.services.orders.repository import OrderRepository
from app.services.storage.in_memory import InMemoryStore
from app.services.storage.seed import load_seed_data

logger = logging.getLogger(__name__)


def build_repositories(settings: Settings) -> tuple[DishRepository, OrderRepository]:
    """Create the application's repositories, seeded if configured."""
    if settings.load_seed_data:
        dishes, orders = load_seed_data(settings.seed_data_file)
    else:
        logger.info("[STARTUP] Seed data disabled - starting with empty collections")
        dishes, orders = [], []
    return (
        DishRepository(InMemoryStore("dishes", dishes)),
        OrderRepository(InMemoryStore("orders", orders)),
    )


def get_dish_repository(request: Request) -> DishRepository:
    """Get the application's dish repository."""
    return request.app.state.dish_repository


def get_order_repository(request: Request) -> OrderRepository:
    """Get the application's order repository."""
    return request.app.state.order_repository


async def get_request_data(request: Request) -> Dict[str, Any]:
    """
    Get the "data" object of a JSON request body.

    A missing body, a non-object body or a non-object "data" all read as
    empty data. A body that is not JSON at all is a validation failure.
    """
    body = await request.body()
    if not body.strip():
        return {}
    try:
        payload = json.loads(body)
    except (ValueError, RecursionError):
        raise ValidationError("Request body must be valid JSON")
    if not isinstance(payload, dict):
        return {}
    data = payload.get("data")
    return data if isinstance(data, dict) else {}
