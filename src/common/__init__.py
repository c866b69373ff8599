# src/common/__init__.py
"""
Shared utilities, constants, errors and the logger.
"""

from src.common.logger import get_logger, log_info, log_error, log_warning, log_debug
from src.common.constants import TypeMsg, OrderStatus, AssignStatus

__all__ = [
    "get_logger",
    "log_info",
    "log_error",
    "log_warning",
    "log_debug",
    "TypeMsg",
    "OrderStatus",
    "AssignStatus",
]
