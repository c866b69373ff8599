# src/services/order_service/routes.py
from fastapi import APIRouter, Depends, Query

from src.core.orders.models import AssignOrderRequest, AssignResult, Order, OrderRequest
from src.core.orders.service import OrderService
from src.services.order_service.dependencies import get_order_service
from src.common.logger import log_debug

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.post("", response_model=Order)
async def create_order(
    request: OrderRequest,
    service: OrderService = Depends(get_order_service)
):
    await log_debug("Request POST /orders")
    return await service.create_order(request)


@router.get("", response_model=list[Order])
async def list_orders(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=0),
    service: OrderService = Depends(get_order_service)
):
    await log_debug(f"Request GET /orders?page={page}&limit={limit}")
    return await service.list_orders(page, limit)


@router.patch("/{order_id}", response_model=AssignResult)
async def assign_order(
    order_id: str,
    request: AssignOrderRequest,
    service: OrderService = Depends(get_order_service)
):
    await log_debug(f"Request PATCH /orders/{order_id}")
    return await service.assign_order(order_id, request.status)
