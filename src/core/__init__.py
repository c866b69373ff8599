# src/core/__init__.py
"""
Core domain layer.
Business rules, independent of the HTTP transport.
"""

from src.core.orders import Order, OrderService
from src.core.geo import GeoService

__all__ = [
    "Order",
    "OrderService",
    "GeoService",
]
