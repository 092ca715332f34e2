"""
Orders component - validate, price, persist and confirm an order.

Each step runs only if the previous one succeeded. A rejected order causes
no pricing, persistence or notification. There is no compensation: an order
that was saved but whose confirmation failed stays saved, and the output
says NOTIFY_FAILED.

Failure results from backends are reported in the output. An exception
raised by a backend breaks the port contract and propagates to the caller.
"""

from __future__ import annotations

import logging

from plugpipe.components.orders.models import (
    CancelOrderOutput,
    CancelStatus,
    OrderError,
    ProcessOrderOutput,
    ProcessStatus,
)
from plugpipe.core.ports.notification import OrderNotifierPort
from plugpipe.core.ports.pricing import PricingPort
from plugpipe.core.ports.repo import OrderRepoPort
from plugpipe.core.ports.validation import OrderValidatorPort
from plugpipe.domain.entities import Order

logger = logging.getLogger(__name__)


class OrderProcessor:
    """Component sequencing the order pipeline over injected ports."""

    def __init__(
        self,
        validator: OrderValidatorPort,
        pricing: PricingPort,
        repo: OrderRepoPort,
        notifier: OrderNotifierPort,
    ) -> None:
        self._validator = validator
        self._pricing = pricing
        self._repo = repo
        self._notifier = notifier

    def process(self, order: Order) -> ProcessOrderOutput:
        """Run one order through the pipeline."""
        # 1. Validate
        verdict = self._validator.validate(order)
        if not verdict.accepted:
            logger.info("Order %s rejected: %s", order.id, "; ".join(verdict.reasons))
            return ProcessOrderOutput(
                status=ProcessStatus.REJECTED,
                order_id=order.id,
                errors=[
                    OrderError(code="VALIDATION_REJECTED", message=reason, field="order")
                    for reason in verdict.reasons
                ],
            )

        # 2. Price
        subtotal = self._pricing.compute_subtotal(order)
        total = self._pricing.compute_total(order)

        # 3. Persist
        saved = self._repo.save(order, total)
        if not saved.ok:
            logger.warning("Order %s not saved: %s", order.id, saved.error)
            return ProcessOrderOutput(
                status=ProcessStatus.SAVE_FAILED,
                order_id=order.id,
                subtotal=subtotal,
                total=total,
                errors=[
                    OrderError(code="SAVE_FAILED", message=saved.error or "", field="repo")
                ],
            )

        # 4. Confirm
        sent = self._notifier.send(order, total)
        if not sent.ok:
            logger.warning("Order %s saved but confirmation failed: %s", order.id, sent.error)
            return ProcessOrderOutput(
                status=ProcessStatus.NOTIFY_FAILED,
                order_id=order.id,
                subtotal=subtotal,
                total=total,
                errors=[
                    OrderError(code="NOTIFY_FAILED", message=sent.error or "", field="notifier")
                ],
            )

        logger.info("Order %s processed, total %.2f", order.id, total)
        return ProcessOrderOutput(
            status=ProcessStatus.COMPLETED,
            order_id=order.id,
            subtotal=subtotal,
            total=total,
        )

    def find_order(self, order_id: int) -> Order | None:
        return self._repo.find_by_id(order_id)

    def cancel(self, order_id: int) -> CancelOrderOutput:
        """Send a cancellation notice for a stored order. Storage is untouched."""
        order = self._repo.find_by_id(order_id)
        if order is None:
            return CancelOrderOutput(
                status=CancelStatus.NOT_FOUND,
                order_id=order_id,
                errors=[
                    OrderError(
                        code="ORDER_NOT_FOUND",
                        message=f"Order {order_id} not found",
                        field="order_id",
                    )
                ],
            )

        sent = self._notifier.send_cancellation(order)
        if not sent.ok:
            return CancelOrderOutput(
                status=CancelStatus.NOTIFY_FAILED,
                order_id=order_id,
                errors=[
                    OrderError(code="NOTIFY_FAILED", message=sent.error or "", field="notifier")
                ],
            )

        return CancelOrderOutput(status=CancelStatus.CANCELLED, order_id=order_id)
