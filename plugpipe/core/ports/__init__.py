# plugpipe - Ports (Protocol Interfaces)
# Capability contracts for adapters; no implementations here

from plugpipe.core.ports.logger import LoggerPort
from plugpipe.core.ports.notification import (
    NotificationError,
    NotificationResult,
    NotificationStatus,
    OrderNotifierPort,
    UserNotifierPort,
)
from plugpipe.core.ports.pricing import PricingPort
from plugpipe.core.ports.repo import (
    OrderRepoPort,
    PersistenceError,
    SaveResult,
    SaveStatus,
    UserRepoPort,
)
from plugpipe.core.ports.validation import OrderValidatorPort, ValidationResult

__all__ = [
    # Logging
    "LoggerPort",
    # Notification
    "NotificationError",
    "NotificationResult",
    "NotificationStatus",
    "OrderNotifierPort",
    "UserNotifierPort",
    # Pricing
    "PricingPort",
    # Persistence
    "OrderRepoPort",
    "PersistenceError",
    "SaveResult",
    "SaveStatus",
    "UserRepoPort",
    # Validation
    "OrderValidatorPort",
    "ValidationResult",
]
