"""
Dev SMS Notifiers.

Log text messages instead of sending them. SMS has no subject line; the
order reference is folded into the body.
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


@dataclass
class SMSUserNotifier(DevChannel):
    """Implements UserNotifierPort over (logged) SMS.

    Goes to User.phone; a user without one is addressed by name.
    """

    channel = "sms"

    def send(self, user: User, message: str) -> NotificationResult:
        return self._deliver(user.phone or user.name, "", message)


@dataclass
class SMSOrderNotifier(DevChannel):
    """Implements OrderNotifierPort over (logged) SMS to the customer."""

    channel = "sms"

    def send(self, order: Order, total: Decimal) -> NotificationResult:
        subject = CONFIRMATION_SUBJECT.format(order_id=order.id)
        return self._deliver(
            order.customer, "", f"{subject}: {CONFIRMATION_BODY.format(total=total)}"
        )

    def send_cancellation(self, order: Order) -> NotificationResult:
        subject = CANCELLATION_SUBJECT.format(order_id=order.id)
        return self._deliver(
            order.customer, "", f"{subject}: {CANCELLATION_BODY.format(product=order.product)}"
        )
