from decimal import Decimal

from plugpipe.domain.entities import Order

DEFAULT_DISCOUNT_RATE = Decimal("0.10")


class DiscountPricing:
    """Applies a fixed policy discount to the undiscounted subtotal."""

    def __init__(self, discount_rate: Decimal = DEFAULT_DISCOUNT_RATE):
        if not Decimal(0) <= discount_rate <= Decimal(1):
            raise ValueError(f"Discount rate must be between 0 and 1, got {discount_rate}")
        self.discount_rate = discount_rate

    def compute_subtotal(self, order: Order) -> Decimal:
        return order.quantity * order.unit_price

    def compute_total(self, order: Order) -> Decimal:
        return self.compute_subtotal(order) * (1 - self.discount_rate)


class FullPricePricing(DiscountPricing):
    """No discount: total equals subtotal."""

    def __init__(self) -> None:
        super().__init__(discount_rate=Decimal(0))
