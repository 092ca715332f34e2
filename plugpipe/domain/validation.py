from plugpipe.core.ports.validation import ValidationResult
from plugpipe.domain.entities import Order
from plugpipe.settings.models import ValidationSettings


class OrderValidator:
    """Baseline acceptability rules: customer present, positive amounts."""

    def validate(self, order: Order) -> ValidationResult:
        reasons = self._check(order)
        if reasons:
            return ValidationResult.reject(*reasons)
        return ValidationResult.accept()

    def _check(self, order: Order) -> list[str]:
        reasons = []
        if not order.customer or not order.customer.strip():
            reasons.append("Customer name is required")
        if order.quantity <= 0:
            reasons.append("Quantity must be greater than zero")
        if order.unit_price <= 0:
            reasons.append("Unit price must be greater than zero")
        return reasons


class LimitsOrderValidator(OrderValidator):
    """Baseline rules plus the configured quantity, product and amount limits."""

    def __init__(self, rules: ValidationSettings):
        self.rules = rules

    def _check(self, order: Order) -> list[str]:
        reasons = super()._check(order)

        # 1. Quantity ceiling
        if self.rules.max_quantity is not None and order.quantity > self.rules.max_quantity:
            reasons.append(f"Quantity must not exceed {self.rules.max_quantity}")

        # 2. Product allow-list (empty list allows everything)
        if self.rules.allowed_products and order.product not in self.rules.allowed_products:
            reasons.append(f"Product '{order.product}' is not available")

        # 3. Undiscounted line total ceiling
        if self.rules.max_line_total is not None:
            line_total = order.quantity * order.unit_price
            if line_total > self.rules.max_line_total:
                reasons.append(
                    f"Order amount {line_total:.2f} exceeds limit {self.rules.max_line_total:.2f}"
                )
        return reasons
