"""Order request handlers, run after their validation pipeline passes."""
import logging
from typing import List

from app.services.identifiers import next_id
from app.services.orders.lifecycle import INITIAL_STATUS, OrderStatus
from app.services.orders.models import Order, build_line_item
from app.services.orders.repository import OrderRepository
from app.services.pipeline.context import RequestContext

logger = logging.getLogger(__name__)


class OrderService:
    """Terminal order operations."""

    def __init__(self, repository: OrderRepository):
        self.repository = repository

    async def list(self) -> List[Order]:
        """Get every order."""
        return await self.repository.list()

    async def create(self, context: RequestContext) -> Order:
        """
        Create an order from the validated context values.

        The status is always the initial one, whatever the payload says.
        """
        order = Order(
            id=next_id(),
            deliver_to=context.get("deliverTo"),
            mobile_number=context.get("mobileNumber"),
            status=INITIAL_STATUS,
            dishes=[build_line_item(item) for item in context.get("dishes")],
        )
        await self.repository.add(order)
        logger.info(
            f"[ORDERS] Created order {order.id} - {len(order.dishes)} line items"
        )
        return order

    async def read(self, context: RequestContext) -> Order:
        """Get the order resolved by the pipeline."""
        return context.get("order")

    async def update(self, context: RequestContext) -> Order:
        """Overwrite every mutable field of the resolved order from the payload."""
        data = context.data
        order = context.get("order")
        old_status = order.status
        order = await self.repository.update(
            order,
            deliver_to=data["deliverTo"],
            mobile_number=data["mobileNumber"],
            status=OrderStatus(data["status"]),
            dishes=[build_line_item(item) for item in data["dishes"]],
        )
        logger.info(
            f"[ORDERS] Updated order {order.id} - status: {old_status} -> {order.status}"
        )
        return order

    async def delete(self, context: RequestContext) -> None:
        """Remove the order addressed by the route."""
        order_id = context.params["orderId"]
        await self.repository.remove(order_id)
        logger.info(f"[ORDERS] Deleted order {order_id}")
