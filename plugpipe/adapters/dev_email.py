"""
Dev E-mail Notifiers.

Log e-mails instead of sending them. Used for local development and tests;
production would put an SMTP or provider adapter behind the same ports.

Key behaviors:
- User notices go to User.email; a user without one is a FAILED result
- Order notices are addressed to the customer
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from plugpipe.adapters.dev_channel import DevChannel
from plugpipe.core.ports.notification import (
    CANCELLATION_BODY,
    CANCELLATION_SUBJECT,
    CONFIRMATION_BODY,
    CONFIRMATION_SUBJECT,
    NotificationResult,
)
from plugpipe.domain.entities import Order, User

DEFAULT_SUBJECT = "Notification"


@dataclass
class EmailUserNotifier(DevChannel):
    """Implements UserNotifierPort over (logged) e-mail."""

    channel = "email"
    subject: str = DEFAULT_SUBJECT

    def send(self, user: User, message: str) -> NotificationResult:
        return self._deliver(user.email, self.subject, message)


@dataclass
class EmailOrderNotifier(DevChannel):
    """Implements OrderNotifierPort over (logged) e-mail."""

    channel = "email"

    def send(self, order: Order, total: Decimal) -> NotificationResult:
        return self._deliver(
            order.customer,
            CONFIRMATION_SUBJECT.format(order_id=order.id),
            CONFIRMATION_BODY.format(total=total),
        )

    def send_cancellation(self, order: Order) -> NotificationResult:
        return self._deliver(
            order.customer,
            CANCELLATION_SUBJECT.format(order_id=order.id),
            CANCELLATION_BODY.format(product=order.product),
        )
