# src/core/orders/service.py
"""
Order lifecycle service.
Creation, paginated listing and assignment of delivery orders.
"""

from __future__ import annotations

from typing import Optional

from src.common.constants import OrderStatus, TypeMsg
from src.common.exceptions import AlreadyAssigned, UnsupportedTransition
from src.common.logger import log_info
from src.core.geo.service import GeoService
from src.core.orders.models import AssignResult, Order, OrderRequest
from src.core.orders.repository import OrderRepository


class OrderService:
    """
    Order lifecycle.

    The only place that knows the order statuses, the transition rule and
    the pagination policy. Holds no order state between calls.
    """

    def __init__(
        self,
        repository: OrderRepository,
        geo_service: GeoService,
        page_size: Optional[int] = None,
    ) -> None:
        """
        Args:
            repository: Order store
            geo_service: Distance lookup
            page_size: Maximum orders per page (from settings if None)
        """
        if page_size is None:
            from src.config import settings
            page_size = settings.pagination.PAGE_SIZE

        self._repo = repository
        self._geo = geo_service
        self.page_size = page_size

    async def create_order(self, request: OrderRequest) -> Order:
        """
        Creates an order for the route between two points.

        Args:
            request: Origin and destination coordinate pairs

        Returns:
            The stored order, UNASSIGNED, with its id

        Raises:
            DistanceLookupFailed: If the distance cannot be computed
            PersistenceFailed: If the store rejects the insert
        """
        distance = await self._geo.compute_distance(request.origin, request.destination)

        order = Order(distance=distance, status=OrderStatus.UNASSIGNED)
        created = await self._repo.create(order)

        await log_info(f"Order {created.id} created, distance {created.distance} m", type_msg=TypeMsg.INFO)
        return created

    async def list_orders(self, page: int, limit: int) -> list[Order]:
        """
        Returns one page of orders.

        The limit is clamped to the configured page size, and the offset is
        always (page - 1) * page_size regardless of the requested limit.

        Args:
            page: Page number, starting at 1
            limit: Requested number of orders

        Returns:
            Orders of the page; empty when limit is 0
        """
        if limit == 0:
            return []

        limit = min(limit, self.page_size)
        skip = (page - 1) * self.page_size

        return await self._repo.get_page(skip, limit)

    async def assign_order(self, order_id: str, requested_status: str) -> AssignResult:
        """
        Assigns an unassigned order (UNASSIGNED -> TAKEN).

        Args:
            order_id: Order id
            requested_status: Must be "TAKEN"

        Returns:
            Success confirmation

        Raises:
            UnsupportedTransition: If requested_status is not TAKEN
            NotFoundFailure: If the order does not exist or the id is malformed
            AlreadyAssigned: If the order is not UNASSIGNED
            PersistenceFailed: If the store fails
        """
        if requested_status != OrderStatus.TAKEN.value:
            raise UnsupportedTransition(requested_status)

        order = await self._repo.get_by_id(order_id)
        if not order.is_unassigned:
            raise AlreadyAssigned()

        order.status = OrderStatus.TAKEN

        # Another request may have taken the order after the read above
        if not await self._repo.update_by_id(order, expected_status=OrderStatus.UNASSIGNED):
            raise AlreadyAssigned()

        await log_info(f"Order {order_id} assigned", type_msg=TypeMsg.INFO)
        return AssignResult()
