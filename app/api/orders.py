"""Order API endpoints."""
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, Response

from app.core.dependencies import get_order_repository, get_request_data
from app.services.orders import pipelines
from app.services.orders.models import Order
from app.services.orders.repository import OrderRepository
from app.services.orders.service import OrderService
from app.services.pipeline.context import RequestContext


router = APIRouter()
logger = logging.getLogger(__name__)


def _context(data: Dict[str, Any] | None = None, order_id: str | None = None) -> RequestContext:
    return RequestContext(
        entity_name=OrderRepository.entity_name,
        params={"orderId": order_id} if order_id is not None else {},
        data=data or {},
    )


def _serialize(order: Order) -> Dict[str, Any]:
    return order.model_dump(mode="json", by_alias=True)


@router.get("/orders")
async def list_orders(
    request: Request,
    repository: OrderRepository = Depends(get_order_repository),
):
    """List every order."""
    logger.debug(
        f"[ORDERS] List requested - Client: {request.client.host if request.client else 'unknown'}"
    )
    orders = await OrderService(repository).list()
    return {"data": [_serialize(order) for order in orders]}


@router.post("/orders", status_code=201)
async def create_order(
    data: Dict[str, Any] = Depends(get_request_data),
    repository: OrderRepository = Depends(get_order_repository),
):
    """Create an order. New orders are always pending."""
    context = await pipelines.create_pipeline().run(_context(data))
    order = await OrderService(repository).create(context)
    return {"data": _serialize(order)}


@router.get("/orders/{order_id}")
async def read_order(
    order_id: str,
    repository: OrderRepository = Depends(get_order_repository),
):
    """Get an order by ID."""
    context = await pipelines.read_pipeline(repository).run(_context(order_id=order_id))
    order = await OrderService(repository).read(context)
    return {"data": _serialize(order)}


@router.put("/orders/{order_id}")
async def update_order(
    order_id: str,
    data: Dict[str, Any] = Depends(get_request_data),
    repository: OrderRepository = Depends(get_order_repository),
):
    """Replace every mutable field of an order, subject to its lifecycle."""
    context = await pipelines.update_pipeline(repository).run(_context(data, order_id))
    order = await OrderService(repository).update(context)
    return {"data": _serialize(order)}


@router.delete("/orders/{order_id}", status_code=204)
async def delete_order(
    order_id: str,
    repository: OrderRepository = Depends(get_order_repository),
):
    """Delete a pending order."""
    context = await pipelines.delete_pipeline(repository).run(_context(order_id=order_id))
    await OrderService(repository).delete(context)
    return Response(status_code=204)
