# src/services/order_service/__init__.py
"""
HTTP transport for the order lifecycle.

Endpoints:
- POST /orders - create an order
- GET /orders?page=&limit= - list orders
- PATCH /orders/{id} - assign an order
- GET /health - liveness
"""

__all__: list[str] = []
