from decimal import Decimal

from plugpipe.core.ports.repo import SaveResult
from plugpipe.domain.entities import Order, User


class InMemoryUserRepo:
    """Dict-backed user store; lives as long as the instance."""

    def __init__(self) -> None:
        self._users: dict[int, User] = {}

    def find_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    def save(self, user: User) -> SaveResult:
        self._users[user.id] = user
        return SaveResult.saved()

    def __len__(self) -> int:
        return len(self._users)


class InMemoryOrderRepo:
    """Dict-backed order store keeping the total handed to save()."""

    def __init__(self) -> None:
        self._orders: dict[int, Order] = {}
        self._totals: dict[int, Decimal] = {}

    def find_by_id(self, order_id: int) -> Order | None:
        return self._orders.get(order_id)

    def save(self, order: Order, total: Decimal) -> SaveResult:
        self._orders[order.id] = order
        self._totals[order.id] = total
        return SaveResult.saved()

    def get_total(self, order_id: int) -> Decimal | None:
        return self._totals.get(order_id)

    def __len__(self) -> int:
        return len(self._orders)
