import logging
import sqlite3
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

from plugpipe.core.ports.repo import PersistenceError, SaveResult
from plugpipe.domain.entities import Order, User

logger = logging.getLogger(__name__)


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


class _SQLiteRepo:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        return conn

    def _fetch_one(self, sql: str, params: tuple[Any, ...]) -> dict[str, Any] | None:
        conn = self._get_conn()
        try:
            return conn.execute(sql, params).fetchone()
        finally:
            conn.close()

    def _write(self, entity: str, entity_id: int, sql: str, params: tuple[Any, ...]) -> SaveResult:
        try:
            self._execute_write(entity, entity_id, sql, params)
        except PersistenceError as e:
            logger.warning(str(e))
            return SaveResult.failed(e.error)
        return SaveResult.saved()

    def _execute_write(
        self, entity: str, entity_id: int, sql: str, params: tuple[Any, ...]
    ) -> None:
        try:
            conn = self._get_conn()
        except sqlite3.Error as e:
            raise PersistenceError(entity, entity_id, str(e)) from e
        try:
            conn.execute(sql, params)
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise PersistenceError(entity, entity_id, str(e)) from e
        finally:
            conn.close()


class SQLiteUserRepo(_SQLiteRepo):
    def save(self, user: User) -> SaveResult:
        now = datetime.now(UTC).isoformat()
        return self._write(
            "user",
            user.id,
            """
            INSERT INTO users (id, name, email, phone, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                name=excluded.name,
                email=excluded.email,
                phone=excluded.phone,
                updated_at=excluded.updated_at
            """,
            (user.id, user.name, user.email, user.phone, now, now),
        )

    def find_by_id(self, user_id: int) -> User | None:
        row = self._fetch_one("SELECT * FROM users WHERE id = ?", (user_id,))
        if not row:
            return None
        return User(id=row["id"], name=row["name"], email=row["email"], phone=row["phone"])


class SQLiteOrderRepo(_SQLiteRepo):
    def save(self, order: Order, total: Decimal) -> SaveResult:
        now = datetime.now(UTC).isoformat()
        # Money is stored as text to keep Decimal values exact
        return self._write(
            "order",
            order.id,
            """
            INSERT INTO orders (
                id, customer, product, quantity, unit_price, total, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                customer=excluded.customer,
                product=excluded.product,
                quantity=excluded.quantity,
                unit_price=excluded.unit_price,
                total=excluded.total,
                updated_at=excluded.updated_at
            """,
            (
                order.id,
                order.customer,
                order.product,
                order.quantity,
                str(order.unit_price),
                str(total),
                now,
                now,
            ),
        )

    def find_by_id(self, order_id: int) -> Order | None:
        row = self._fetch_one("SELECT * FROM orders WHERE id = ?", (order_id,))
        if not row:
            return None
        return Order(
            id=row["id"],
            customer=row["customer"],
            product=row["product"],
            quantity=row["quantity"],
            unit_price=Decimal(row["unit_price"]),
        )

    def get_total(self, order_id: int) -> Decimal | None:
        """Stored total for an order, as handed to save()."""
        row = self._fetch_one("SELECT total FROM orders WHERE id = ?", (order_id,))
        return Decimal(row["total"]) if row else None
