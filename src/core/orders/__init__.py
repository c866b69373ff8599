# src/core/orders/__init__.py
"""
Orders domain.
Models, persistence and lifecycle rules for delivery orders.
"""

from src.core.orders.models import Order, OrderRequest, AssignOrderRequest, AssignResult
from src.core.orders.service import OrderService
from src.core.orders.repository import OrderRepository

__all__ = [
    "Order",
    "OrderRequest",
    "AssignOrderRequest",
    "AssignResult",
    "OrderService",
    "OrderRepository",
]
