# src/services/__init__.py
"""
HTTP services.

- order_service: create, list and assign delivery orders
"""

__all__: list[str] = []
