"""
Simulated Database Adapters.

Stand-ins for external database engines. They describe the write they
would perform through the module logger and keep a record of it, but
touch no real server.

Key behaviors:
- save() always succeeds and records the entity in `saved`
- MySQL/PostgreSQL lookups return a canned user carrying the requested id
- SimulatedOrderRepo finds nothing
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import ClassVar

from plugpipe.core.ports.repo import SaveResult
from plugpipe.domain.entities import Order, User

logger = logging.getLogger(__name__)


@dataclass
class _SimulatedUserRepo:
    engine: ClassVar[str] = "db"
    canned_name: ClassVar[str] = ""
    canned_email: ClassVar[str] = ""

    saved: list[User] = field(default_factory=list)
    lookups: list[int] = field(default_factory=list)

    def find_by_id(self, user_id: int) -> User | None:
        logger.info("[%s] Looking up user %s", self.engine, user_id)
        self.lookups.append(user_id)
        return User(id=user_id, name=self.canned_name, email=self.canned_email)

    def save(self, user: User) -> SaveResult:
        logger.info(
            "[%s] Saving user %s (name=%s, email=%s)",
            self.engine,
            user.id,
            user.name,
            user.email,
        )
        self.saved.append(user)
        return SaveResult.saved()


@dataclass
class MySQLUserRepo(_SimulatedUserRepo):
    """Simulated MySQL user table."""

    engine = "MySQL"
    canned_name = "João Silva"
    canned_email = "joao@example.com"


@dataclass
class PostgreSQLUserRepo(_SimulatedUserRepo):
    """Simulated PostgreSQL user table."""

    engine = "PostgreSQL"
    canned_name = "Maria Santos"
    canned_email = "maria@example.com"


@dataclass
class SimulatedOrderRepo:
    """Simulated order table: writes are logged, lookups find nothing."""

    saved: list[tuple[Order, Decimal]] = field(default_factory=list)

    def find_by_id(self, order_id: int) -> Order | None:
        logger.info("[db] Looking up order %s", order_id)
        return None

    def save(self, order: Order, total: Decimal) -> SaveResult:
        logger.info(
            "[db] Saving order %s (customer=%s, product=%s, total=%.2f)",
            order.id,
            order.customer,
            order.product,
            total,
        )
        self.saved.append((order, total))
        return SaveResult.saved()
