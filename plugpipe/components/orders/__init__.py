"""Orders component - validate/price/persist/confirm pipeline."""

from plugpipe.components.orders.component import OrderProcessor
from plugpipe.components.orders.models import (
    CancelOrderOutput,
    CancelStatus,
    OrderError,
    ProcessOrderOutput,
    ProcessStatus,
)

__all__ = [
    # Component
    "OrderProcessor",
    # Models
    "CancelOrderOutput",
    "CancelStatus",
    "OrderError",
    "ProcessOrderOutput",
    "ProcessStatus",
]
