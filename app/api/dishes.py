"""Dish API endpoints."""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, Response

from app.core.dependencies import get_dish_repository, get_request_data
from app.services.dishes import pipelines
from app.services.dishes.repository import DishRepository
from app.services.dishes.service import DishService
from app.services.pipeline.context import RequestContext


router = APIRouter()
logger = logging.getLogger(__name__)


def _context(data: Dict[str, Any] | None = None, dish_id: str | None = None) -> RequestContext:
    return RequestContext(
        entity_name=DishRepository.entity_name,
        params={"dishId": dish_id} if dish_id is not None else {},
        data=data or {},
    )


@router.get("/dishes")
async def list_dishes(
    request: Request,
    repository: DishRepository = Depends(get_dish_repository),
):
    """List every dish."""
    logger.debug(
        f"[DISHES] List requested - Client: {request.client.host if request.client else 'unknown'}"
    )
    dishes = await DishService(repository).list()
    return {"data": [dish.model_dump() for dish in dishes]}


@router.post("/dishes", status_code=201)
async def create_dish(
    data: Dict[str, Any] = Depends(get_request_data),
    repository: DishRepository = Depends(get_dish_repository),
):
    """Create a dish."""
    context = await pipelines.create_pipeline().run(_context(data))
    dish = await DishService(repository).create(context)
    return {"data": dish.model_dump()}


@router.get("/dishes/{dish_id}")
async def read_dish(
    dish_id: str,
    repository: DishRepository = Depends(get_dish_repository),
):
    """Get a dish by ID."""
    context = await pipelines.read_pipeline(repository).run(_context(dish_id=dish_id))
    dish = await DishService(repository).read(context)
    return {"data": dish.model_dump()}


@router.put("/dishes/{dish_id}")
async def update_dish(
    dish_id: str,
    data: Dict[str, Any] = Depends(get_request_data),
    repository: DishRepository = Depends(get_dish_repository),
):
    """Replace every mutable field of a dish."""
    context = await pipelines.update_pipeline(repository).run(_context(data, dish_id))
    dish = await DishService(repository).update(context)
    return {"data": dish.model_dump()}


@router.delete("/dishes/{dish_id}", status_code=204)
async def delete_dish(
    dish_id: str,
    repository: DishRepository = Depends(get_dish_repository),
):
    """Delete a dish."""
    context = await pipelines.delete_pipeline(repository).run(_context(dish_id=dish_id))
    await DishService(repository).delete(context)
    return Response(status_code=204)
