# src/common/constants.py
"""
Shared constants and enumerations.
"""

from enum import Enum


class TypeMsg(str, Enum):
    """Log message types."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class OrderStatus(str, Enum):
    """Order statuses. UNASSIGNED -> TAKEN is the only transition."""
    UNASSIGNED = "UNASSIGNED"
    TAKEN = "TAKEN"

    def __str__(self) -> str:
        return self.value


class AssignStatus(str, Enum):
    """Outcome reported by a successful assignment."""
    SUCCESS = "SUCCESS"

    def __str__(self) -> str:
        return self.value
