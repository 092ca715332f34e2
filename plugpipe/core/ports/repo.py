"""
Persistence Port Interfaces.

Protocol-based lookup/save contracts for users and orders.
Used by UserService and OrderProcessor; neither knows which store is behind.

Key requirements:
- Lookup by caller-supplied id; absent entities are None, not errors
- Save is atomic from the caller's point of view: it succeeds or fails whole
- No connection handles or query language leak through the port

Implementation strategies:
1. MySQLUserRepo / PostgreSQLUserRepo: simulated engines (dev/demo)
2. InMemoryUserRepo / InMemoryOrderRepo: dict-backed (tests)
3. SQLiteUserRepo / SQLiteOrderRepo: durable local store
4. SimulatedOrderRepo: logs writes, never finds anything

All strategies implement the same ports.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Protocol

from plugpipe.domain.entities import Order, User


class SaveStatus(Enum):
    """Save result status."""

    SAVED = "saved"
    FAILED = "failed"


@dataclass(frozen=True)
class SaveResult:
    """Result of a save attempt."""

    status: SaveStatus
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is SaveStatus.SAVED

    @classmethod
    def saved(cls) -> SaveResult:
        """Create a successful save result."""
        return cls(status=SaveStatus.SAVED)

    @classmethod
    def failed(cls, error: str) -> SaveResult:
        """Create a failed save result."""
        return cls(status=SaveStatus.FAILED, error=error)


class UserRepoPort(Protocol):
    """
    User persistence interface.

    Implementations:
    - MySQLUserRepo, PostgreSQLUserRepo: simulated
    - InMemoryUserRepo
    - SQLiteUserRepo
    """

    def find_by_id(self, user_id: int) -> User | None:
        """Return the stored user, or None when absent."""
        ...

    def save(self, user: User) -> SaveResult:
        """
        Persist a user.

        Notes:
            - Must not raise; return a failed result instead
        """
        ...


class OrderRepoPort(Protocol):
    """
    Order persistence interface.

    The total is computed upstream and stored as given; repositories
    never recompute it.
    """

    def find_by_id(self, order_id: int) -> Order | None:
        """Return the stored order, or None when absent."""
        ...

    def save(self, order: Order, total: Decimal) -> SaveResult:
        """Persist an order together with its already-computed total."""
        ...


# --- Error Types ---


class PersistenceError(Exception):
    """Raised inside a repository when the underlying store fails."""

    def __init__(self, entity: str, entity_id: int, error: str) -> None:
        self.entity = entity
        self.entity_id = entity_id
        self.error = error
        super().__init__(f"Failed to persist {entity} {entity_id}: {error}")
