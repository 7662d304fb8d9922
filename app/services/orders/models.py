"""Order models."""
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.services.orders.lifecycle import OrderStatus


class OrderLineItem(BaseModel):
    """A dish reference and quantity within an order.

    Only the wire key "dishId" binds the dish reference. Any other key the
    client supplies, "dish_id" included, is kept as an extra and echoed back.
    """

    model_config = ConfigDict(extra="allow")

    dish_id: Optional[str] = Field(default=None, alias="dishId")
    quantity: int


class Order(BaseModel):
    """Customer order."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    deliver_to: str = Field(alias="deliverTo")
    mobile_number: str = Field(alias="mobileNumber")
    status: OrderStatus = OrderStatus.PENDING
    dishes: List[OrderLineItem]


def build_line_item(item: Dict[str, Any]) -> OrderLineItem:
    """Build a line item from a validated raw item, normalizing its quantity."""
    return OrderLineItem.model_validate({**item, "quantity": int(item["quantity"])})
