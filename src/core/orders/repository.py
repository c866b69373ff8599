# src/core/orders/repository.py
"""
Order persistence in PostgreSQL.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from src.common.constants import OrderStatus, TypeMsg
from src.common.exceptions import NotFoundFailure, PersistenceFailed
from src.common.logger import log_error, log_info
from src.core.orders.models import Order
from src.infra.database import DatabaseManager


class OrderRepository:
    """Order repository. The orders table is the only source of truth."""

    def __init__(self, db: DatabaseManager) -> None:
        """
        Args:
            db: Database manager (injected)
        """
        self._db = db

    @staticmethod
    def _parse_id(order_id: Optional[str]) -> UUID:
        """Validates an order identifier, raising NotFoundFailure when malformed."""
        try:
            return UUID(str(order_id))
        except (TypeError, ValueError):
            raise NotFoundFailure("Invalid Id") from None

    async def get_by_id(self, order_id: str) -> Order:
        """
        Fetches an order by id.

        Args:
            order_id: Order UUID

        Returns:
            The order

        Raises:
            NotFoundFailure: If the id is malformed or no such order exists
            PersistenceFailed: If the query fails
        """
        uid = self._parse_id(order_id)

        try:
            row = await self._db.fetchrow(
                """
                SELECT id, distance, status
                FROM orders
                WHERE id = $1
                """,
                uid,
            )
        except Exception as e:
            await log_error(f"Failed to fetch order {order_id}: {e}")
            raise PersistenceFailed(f"Unable to fetch order: {e}") from e

        if row is None:
            raise NotFoundFailure("not found")

        return self._row_to_order(row)

    async def get_page(self, skip: int, limit: int) -> list[Order]:
        """
        Fetches a slice of orders in creation order.

        Args:
            skip: Number of orders to skip
            limit: Maximum number of orders to return

        Returns:
            Orders, oldest first
        """
        try:
            rows = await self._db.fetch(
                """
                SELECT id, distance, status
                FROM orders
                ORDER BY created_at, id
                LIMIT $1 OFFSET $2
                """,
                limit,
                skip,
            )
        except Exception as e:
            await log_error(f"Failed to fetch orders (skip={skip}, limit={limit}): {e}")
            raise PersistenceFailed(f"Unable to fetch orders: {e}") from e

        return [self._row_to_order(row) for row in rows]

    async def create(self, order: Order) -> Order:
        """
        Inserts an order; the database generates its id.

        Args:
            order: Order without id

        Returns:
            The stored order, id included
        """
        try:
            row = await self._db.fetchrow(
                """
                INSERT INTO orders (distance, status)
                VALUES ($1, $2)
                RETURNING id, distance, status
                """,
                order.distance,
                order.status.value,
            )
        except Exception as e:
            await log_error(f"Failed to create order: {e}")
            raise PersistenceFailed(f"Unable to store order: {e}") from e

        if row is None:
            raise PersistenceFailed("Unable to store order: no row returned")

        created = self._row_to_order(row)
        await log_info(f"Order {created.id} stored", type_msg=TypeMsg.DEBUG)
        return created

    async def update_by_id(
        self,
        order: Order,
        expected_status: OrderStatus,
    ) -> bool:
        """
        Writes the order's status back while the stored status still
        equals expected_status (compare-and-swap).

        Args:
            order: Order carrying the new status
            expected_status: Status the stored row must currently have

        Returns:
            True if a row was updated
        """
        uid = self._parse_id(order.id)

        try:
            result = await self._db.execute(
                "UPDATE orders SET status = $2 WHERE id = $1 AND status = $3",
                uid,
                order.status.value,
                expected_status.value,
            )
        except Exception as e:
            await log_error(f"Failed to update order {order.id}: {e}")
            raise PersistenceFailed(f"Unable to update order: {e}") from e

        # asyncpg returns the command tag, e.g. "UPDATE 1"
        updated = self._affected_rows(result) > 0
        if updated:
            await log_info(f"Order {order.id} status set to {order.status.value}", type_msg=TypeMsg.DEBUG)
        return updated

    @staticmethod
    def _affected_rows(command_tag: str) -> int:
        try:
            return int(str(command_tag).rsplit(" ", 1)[-1])
        except ValueError:
            return 0

    def _row_to_order(self, row) -> Order:
        """Converts a database row to an Order."""
        return Order(
            id=str(row["id"]),
            distance=row["distance"],
            status=OrderStatus(row["status"]),
        )
