"""Dish request handlers, run after their validation pipeline passes."""
import logging
from typing import List

from app.services.dishes.models import Dish
from app.services.dishes.repository import DishRepository
from app.services.identifiers import next_id
from app.services.pipeline.context import RequestContext

logger = logging.getLogger(__name__)


class DishService:
    """Terminal dish operations."""

    def __init__(self, repository: DishRepository):
        self.repository = repository

    async def list(self) -> List[Dish]:
        """Get every dish."""
        return await self.repository.list()

    async def create(self, context: RequestContext) -> Dish:
        """Create a dish from the validated context values."""
        dish = Dish(
            id=next_id(),
            name=context.get("name"),
            description=context.get("description"),
            price=int(context.get("price")),
            image_url=context.get("image_url"),
        )
        await self.repository.add(dish)
        logger.info(f"[DISHES] Created dish {dish.id} ({dish.name})")
        return dish

    async def read(self, context: RequestContext) -> Dish:
        """Get the dish resolved by the pipeline."""
        return context.get("dish")

    async def update(self, context: RequestContext) -> Dish:
        """Overwrite every mutable field of the resolved dish from the payload."""
        data = context.data
        dish = await self.repository.update(
            context.get("dish"),
            name=data["name"],
            description=data["description"],
            price=int(data["price"]),
            image_url=data["image_url"],
        )
        logger.info(f"[DISHES] Updated dish {dish.id}")
        return dish

    async def delete(self, context: RequestContext) -> None:
        """Remove the dish addressed by the route."""
        dish_id = context.params["dishId"]
        await self.repository.remove(dish_id)
        logger.info(f"[DISHES] Deleted dish {dish_id}")
