# src/core/orders/models.py
"""
Order data models.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from src.common.constants import AssignStatus, OrderStatus


class Order(BaseModel):
    """Delivery order."""

    id: Optional[str] = Field(None, description="Order UUID, assigned by the store")
    distance: int = Field(..., ge=0, description="Route distance in meters")
    status: OrderStatus = Field(OrderStatus.UNASSIGNED, description="Order status")

    class Config:
        from_attributes = True

    @property
    def is_unassigned(self) -> bool:
        """Whether the order can still be assigned."""
        return self.status == OrderStatus.UNASSIGNED


class OrderRequest(BaseModel):
    """Order creation payload: two [latitude, longitude] pairs."""

    origin: list[str] = Field(..., description="[latitude, longitude] of the start")
    destination: list[str] = Field(..., description="[latitude, longitude] of the end")


class AssignOrderRequest(BaseModel):
    """Order assignment payload."""

    status: str = ""

    @field_validator("status", mode="before")
    @classmethod
    def null_as_empty(cls, v: Optional[str]) -> str:
        """A null status is treated like a missing one."""
        return "" if v is None else v


class AssignResult(BaseModel):
    """Confirmation returned after a successful assignment."""

    status: AssignStatus = AssignStatus.SUCCESS
