"""Orders component models - frozen dataclass outputs."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class ProcessStatus(Enum):
    """Where process() stopped."""

    COMPLETED = "completed"
    REJECTED = "rejected"  # Validation declined; nothing else ran
    SAVE_FAILED = "save_failed"  # Nothing saved, nothing sent
    NOTIFY_FAILED = "notify_failed"  # Saved, confirmation not delivered


class CancelStatus(Enum):
    CANCELLED = "cancelled"
    NOT_FOUND = "not_found"
    NOTIFY_FAILED = "notify_failed"


@dataclass(frozen=True)
class OrderError:
    """Error details for order operations."""

    code: str
    message: str
    field: str


@dataclass(frozen=True)
class ProcessOrderOutput:
    """Output for the validate/compute/persist/notify pipeline."""

    status: ProcessStatus
    order_id: int
    subtotal: Decimal | None = None
    total: Decimal | None = None
    errors: list[OrderError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.status is ProcessStatus.COMPLETED


@dataclass(frozen=True)
class CancelOrderOutput:
    """Output for order cancellation."""

    status: CancelStatus
    order_id: int
    errors: list[OrderError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.status is CancelStatus.CANCELLED
