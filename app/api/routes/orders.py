"""
Order Routes
JSON endpoints for the orders collection
"""
from fastapi import APIRouter, Depends, Query, Request
from typing import Optional

from app.api.deps import get_order_service, json_body_schema, read_json_body
from app.models.order import DrinkOrder, OrderCreate
from app.services.orders import OrderService

router = APIRouter()


@router.get("")
async def list_orders(service: OrderService = Depends(get_order_service)):
    """Get every order in submission order"""
    return service.list_orders()


@router.post("", openapi_extra=json_body_schema(OrderCreate))
async def create_order(
    request: Request,
    service: OrderService = Depends(get_order_service)
):
    """Submit a new order"""
    body = await read_json_body(request, "Failed to create order")
    return service.create_order(body)


@router.put("", openapi_extra=json_body_schema(DrinkOrder))
async def update_order(
    request: Request,
    service: OrderService = Depends(get_order_service)
):
    """Replace an order with the record sent (used to toggle completion)"""
    body = await read_json_body(request, "Failed to update order")
    return service.update_order(body)


@router.delete("")
async def delete_order(
    id: Optional[str] = Query(None, description="Order id"),
    service: OrderService = Depends(get_order_service)
):
    """Delete one order"""
    return service.delete_order(id)
