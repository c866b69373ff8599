# src/services/order_service/dependencies.py
"""
Dependency injection for the order service.
"""

from __future__ import annotations

from src.core.geo.service import GeoService
from src.core.orders.repository import OrderRepository
from src.core.orders.service import OrderService
from src.infra.database import get_db


# Shared for the lifetime of the app (owns an HTTP connection pool)
_geo_service: GeoService | None = None


async def init_dependencies() -> None:
    """Creates shared collaborators on startup."""
    global _geo_service
    if _geo_service is None:
        _geo_service = GeoService()


def get_geo_service() -> GeoService:
    """Returns the distance lookup client."""
    if _geo_service is None:
        raise RuntimeError("GeoService is not initialized. Call init_dependencies() first.")
    return _geo_service


def get_order_repository() -> OrderRepository:
    return OrderRepository(get_db())


def get_order_service() -> OrderService:
    """Builds the lifecycle service for one request."""
    return OrderService(get_order_repository(), get_geo_service())


async def cleanup_dependencies() -> None:
    """Releases shared collaborators on shutdown."""
    global _geo_service
    if _geo_service is not None:
        await _geo_service.close()
        _geo_service = None
