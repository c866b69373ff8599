# src/common/exceptions.py
"""
Domain errors raised by the order lifecycle and its collaborators.
The HTTP layer maps each kind to a status code.
"""

from __future__ import annotations


class OrderServiceError(Exception):
    """Base class for every classified order-service failure."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationFailure(OrderServiceError):
    """Input rejected before any I/O."""
    pass


class UnsupportedTransition(ValidationFailure):
    """Requested status change is not UNASSIGNED -> TAKEN."""

    def __init__(self, requested_status: str) -> None:
        super().__init__(
            "This API route only supports assigning of orders. "
            "Please provide requested status as TAKEN"
        )
        self.requested_status = requested_status


class NotFoundFailure(OrderServiceError):
    """Order does not exist or its identifier is malformed."""
    pass


class DistanceLookupFailed(OrderServiceError):
    """Distance between the two points could not be computed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Unable to fetch distance from Google APIs. {reason}")
        self.reason = reason


class AlreadyAssigned(OrderServiceError):
    """Order is no longer UNASSIGNED."""

    def __init__(self, message: str = "Order is already assigned") -> None:
        super().__init__(message)


class PersistenceFailed(OrderServiceError):
    """Store rejected a read or a write."""
    pass
