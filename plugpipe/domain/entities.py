from decimal import Decimal

from pydantic import BaseModel, ConfigDict

# Entities are value snapshots: frozen so no backend can mutate the copy it
# receives. Acceptability rules live in plugpipe.domain.validation.


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    email: str
    phone: str | None = None


class Order(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    customer: str
    product: str
    quantity: int
    unit_price: Decimal
