from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field

UserRepoBackend = Literal["mysql", "postgresql", "memory", "sqlite"]
OrderRepoBackend = Literal["simulated", "memory", "sqlite"]
NotifierBackend = Literal["email", "sms"]
LoggerBackend = Literal["console", "file"]
ValidatorBackend = Literal["standard", "limits"]
PricingBackend = Literal["discount", "full_price"]


class ProjectSettings(BaseModel):
    slug: str
    settings_version: str

class BackendSettings(BaseModel):
    user_repo: UserRepoBackend = "memory"
    order_repo: OrderRepoBackend = "memory"
    user_notifier: NotifierBackend = "email"
    order_notifier: NotifierBackend = "email"
    logger: LoggerBackend = "console"
    validator: ValidatorBackend = "standard"
    pricing: PricingBackend = "discount"

class PricingSettings(BaseModel):
    discount_rate: Decimal = Field(default=Decimal("0.10"), ge=0, le=1)

class ValidationSettings(BaseModel):
    max_quantity: int | None = None
    allowed_products: list[str] = Field(default_factory=list)
    max_line_total: Decimal | None = None

class LoggingSettings(BaseModel):
    name: str = "plugpipe"
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    file_path: str = "logs/plugpipe.log"

class StorageSettings(BaseModel):
    db_path: str = "data/plugpipe.db"
    migrations_dir: str = "migrations"

class NotificationSettings(BaseModel):
    welcome_template: str = "Welcome, {name}! Your account was created successfully."
    sender: str = "no-reply@example.com"
    log_body: bool = True

class Settings(BaseModel):
    project: ProjectSettings
    backends: BackendSettings = Field(default_factory=BackendSettings)
    pricing: PricingSettings = Field(default_factory=PricingSettings)
    validation: ValidationSettings = Field(default_factory=ValidationSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    notifications: NotificationSettings = Field(default_factory=NotificationSettings)
