"""
Notification Port Interfaces.

Protocol-based interfaces for telling a user or a customer that something
happened (welcome message, order confirmation, order cancellation).

Key requirements:
- Stateless send operation
- Must not raise; a delivery problem is a FAILED result
- Channel details (addresses, gateways) stay inside the adapter

Implementation strategies:
1. EmailUserNotifier / EmailOrderNotifier: logs e-mails (dev/test)
2. SMSUserNotifier / SMSOrderNotifier: logs text messages (dev/test)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum
from typing import Protocol

from plugpipe.domain.entities import Order, User


class NotificationStatus(Enum):
    """Notification result status."""

    SENT = "sent"
    SKIPPED = "skipped"  # Dev adapter: recorded, nothing delivered
    FAILED = "failed"


@dataclass(frozen=True)
class NotificationResult:
    """Result of a notification attempt."""

    status: NotificationStatus
    channel: str
    recipient: str = ""
    message_id: str | None = None
    error: str | None = None
    sent_at: datetime | None = None

    @property
    def ok(self) -> bool:
        return self.status is not NotificationStatus.FAILED

    @classmethod
    def success(
        cls, channel: str, recipient: str, message_id: str | None = None
    ) -> NotificationResult:
        """Create a successful send result."""
        return cls(
            status=NotificationStatus.SENT,
            channel=channel,
            recipient=recipient,
            message_id=message_id,
            sent_at=datetime.now(UTC),
        )

    @classmethod
    def skipped(
        cls, channel: str, recipient: str, message_id: str | None = None
    ) -> NotificationResult:
        """Create a skipped result (dev adapter)."""
        return cls(
            status=NotificationStatus.SKIPPED,
            channel=channel,
            recipient=recipient,
            message_id=message_id,
            error="Dev mode - message logged, not delivered",
        )

    @classmethod
    def failed(cls, channel: str, recipient: str, error: str) -> NotificationResult:
        """Create a failed result."""
        return cls(
            status=NotificationStatus.FAILED,
            channel=channel,
            recipient=recipient,
            error=error,
        )


class UserNotifierPort(Protocol):
    """Sends a free-form message to a user."""

    def send(self, user: User, message: str) -> NotificationResult:
        ...


class OrderNotifierPort(Protocol):
    """
    Sends order notices to the ordering customer.

    Implementations:
    - EmailOrderNotifier
    - SMSOrderNotifier
    """

    def send(self, order: Order, total: Decimal) -> NotificationResult:
        """Send a confirmation referencing the computed total."""
        ...

    def send_cancellation(self, order: Order) -> NotificationResult:
        """Send a cancellation notice."""
        ...


# --- Error Types ---


class NotificationError(Exception):
    """Raised inside a notifier when a message cannot be delivered."""

    def __init__(self, channel: str, recipient: str, error: str) -> None:
        self.channel = channel
        self.recipient = recipient
        self.error = error
        super().__init__(f"Failed to notify {recipient} via {channel}: {error}")


# --- Constants ---

CONFIRMATION_SUBJECT = "Order confirmation #{order_id}"
CONFIRMATION_BODY = "Your order totalling {total:.2f} has been confirmed."
CANCELLATION_SUBJECT = "Order cancellation #{order_id}"
CANCELLATION_BODY = "Your order of {product} has been cancelled."
