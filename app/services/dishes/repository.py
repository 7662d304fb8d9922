"""Dish repository."""
from typing import List, Optional

from app.services.dishes.models import Dish
from app.services.storage.base import EntityStore


class DishRepository:
    """Repository for dish operations."""

    entity_name = "Dish"

    def __init__(self, store: EntityStore[Dish]):
        self.store = store

    async def list(self) -> List[Dish]:
        """Get every dish."""
        return await self.store.list_all()

    async def get_by_id(self, dish_id: str) -> Optional[Dish]:
        """Get dish by ID."""
        return await self.store.find(lambda dish: dish.id == dish_id)

    async def add(self, dish: Dish) -> Dish:
        """Add a dish."""
        return await self.store.insert(dish)

    async def update(self, dish: Dish, **fields) -> Dish:
        """Overwrite fields of a stored dish."""
        return await self.store.replace(dish, **fields)

    async def remove(self, dish_id: str) -> Optional[Dish]:
        """Remove dish by ID. No-op if it is not stored."""
        return await self.store.remove_where(lambda dish: dish.id == dish_id)

    async def count(self) -> int:
        """Number of dishes."""
        return await self.store.count()
