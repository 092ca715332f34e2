from decimal import Decimal
from typing import Protocol

from plugpipe.domain.entities import Order


class PricingPort(Protocol):
    """
    Derives money values from an order.

    Both operations are pure: no side effects, same input gives same output.
    compute_total must agree with compute_subtotal on the undiscounted term.
    """

    def compute_subtotal(self, order: Order) -> Decimal:
        """Return quantity x unit price, with no discount applied."""
        ...

    def compute_total(self, order: Order) -> Decimal:
        """Return the amount the customer pays."""
        ...
