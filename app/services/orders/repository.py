"""Order repository."""
from typing import List, Optional

from app.services.orders.models import Order
from app.services.storage.base import EntityStore


class OrderRepository:
    """Repository for order operations."""

    entity_name = "Order"

    def __init__(self, store: EntityStore[Order]):
        self.store = store

    async def list(self) -> List[Order]:
        """Get every order."""
        return await self.store.list_all()

    async def get_by_id(self, order_id: str) -> Optional[Order]:
        """Get order by ID."""
        return await self.store.find(lambda order: order.id == order_id)

    async def add(self, order: Order) -> Order:
        """Add an order."""
        return await self.store.insert(order)

    async def update(self, order: Order, **fields) -> Order:
        """Overwrite fields of a stored order."""
        return await self.store.replace(order, **fields)

    async def remove(self, order_id: str) -> Optional[Order]:
        """Remove order by ID. No-op if it is not stored."""
        return await self.store.remove_where(lambda order: order.id == order_id)

    async def count(self) -> int:
        """Number of orders."""
        return await self.store.count()
