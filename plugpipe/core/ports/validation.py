"""
Validation Port Interface.

Accept or reject a candidate order. Rejection carries one or more
human-readable reasons and is terminal for the operation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from plugpipe.domain.entities import Order


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a candidate."""

    accepted: bool
    reasons: tuple[str, ...] = ()

    @classmethod
    def accept(cls) -> ValidationResult:
        return cls(accepted=True)

    @classmethod
    def reject(cls, *reasons: str) -> ValidationResult:
        if not reasons:
            raise ValueError("A rejection needs at least one reason")
        return cls(accepted=False, reasons=tuple(reasons))


class OrderValidatorPort(Protocol):
    def validate(self, order: Order) -> ValidationResult:
        """Decide whether the order may enter the pipeline."""
        ...
