"""Health check endpoint."""
import logging
from fastapi import APIRouter, Depends, Request

from app.core.dependencies import get_dish_repository, get_order_repository
from app.services.dishes.repository import DishRepository
from app.services.orders.repository import OrderRepository

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health_check(
    request: Request,
    dish_repository: DishRepository = Depends(get_dish_repository),
    order_repository: OrderRepository = Depends(get_order_repository),
):
    """Health check endpoint with collection sizes."""
    logger.debug(
        f"[HEALTH] Health check requested - Client: {request.client.host if request.client else 'unknown'}"
    )
    return {
        "status": "healthy",
        "dishes": await dish_repository.count(),
        "orders": await order_repository.count(),
    }
