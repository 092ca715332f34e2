from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from plugpipe.adapters.dev_email import EmailOrderNotifier, EmailUserNotifier
from plugpipe.adapters.dev_sms import SMSOrderNotifier, SMSUserNotifier
from plugpipe.adapters.log_sinks import ConsoleLogger, FileLogger
from plugpipe.adapters.memory_repos import InMemoryOrderRepo, InMemoryUserRepo
from plugpipe.adapters.simulated_db import MySQLUserRepo, PostgreSQLUserRepo, SimulatedOrderRepo
from plugpipe.adapters.sqlite.migrator import SQLiteMigrator
from plugpipe.adapters.sqlite.repos import SQLiteOrderRepo, SQLiteUserRepo
from plugpipe.components.accounts import UserService
from plugpipe.components.orders import OrderProcessor
from plugpipe.core.ports import (
    LoggerPort,
    OrderNotifierPort,
    OrderRepoPort,
    OrderValidatorPort,
    PricingPort,
    UserNotifierPort,
    UserRepoPort,
)
from plugpipe.domain.pricing import DiscountPricing, FullPricePricing
from plugpipe.domain.validation import LimitsOrderValidator, OrderValidator
from plugpipe.settings.models import Settings


@dataclass
class PipelineContext:
    """Composition root: one chosen backend per capability, plus the orchestrators."""

    user_service: UserService
    order_processor: OrderProcessor
    user_repo: UserRepoPort
    order_repo: OrderRepoPort
    user_notifier: UserNotifierPort
    order_notifier: OrderNotifierPort
    logger: LoggerPort
    validator: OrderValidatorPort
    pricing: PricingPort
    settings: Settings

    @classmethod
    def create(cls, settings: Settings, base_dir: Path | None = None) -> PipelineContext:
        # Relative paths in settings resolve against base_dir (default: cwd)
        base_dir = base_dir or Path.cwd()
        backends = settings.backends

        if "sqlite" in (backends.user_repo, backends.order_repo):
            SQLiteMigrator(
                str(base_dir / settings.storage.db_path),
                str(base_dir / settings.storage.migrations_dir),
            ).run_migrations()

        # Adapters
        user_repo = _build_user_repo(settings, base_dir)
        order_repo = _build_order_repo(settings, base_dir)
        user_notifier = _build_user_notifier(settings)
        order_notifier = _build_order_notifier(settings)
        logger = _build_logger(settings, base_dir)
        validator = _build_validator(settings)
        pricing = _build_pricing(settings)

        # Orchestrators
        user_service = UserService(
            user_repo,
            user_notifier,
            logger,
            welcome_template=settings.notifications.welcome_template,
        )
        order_processor = OrderProcessor(validator, pricing, order_repo, order_notifier)

        return cls(
            user_service=user_service,
            order_processor=order_processor,
            user_repo=user_repo,
            order_repo=order_repo,
            user_notifier=user_notifier,
            order_notifier=order_notifier,
            logger=logger,
            validator=validator,
            pricing=pricing,
            settings=settings,
        )


def _build_user_repo(settings: Settings, base_dir: Path) -> UserRepoPort:
    choice = settings.backends.user_repo
    if choice == "mysql":
        return MySQLUserRepo()
    elif choice == "postgresql":
        return PostgreSQLUserRepo()
    elif choice == "sqlite":
        return SQLiteUserRepo(str(base_dir / settings.storage.db_path))
    return InMemoryUserRepo()


def _build_order_repo(settings: Settings, base_dir: Path) -> OrderRepoPort:
    choice = settings.backends.order_repo
    if choice == "simulated":
        return SimulatedOrderRepo()
    elif choice == "sqlite":
        return SQLiteOrderRepo(str(base_dir / settings.storage.db_path))
    return InMemoryOrderRepo()


def _build_user_notifier(settings: Settings) -> UserNotifierPort:
    cfg = settings.notifications
    if settings.backends.user_notifier == "sms":
        return SMSUserNotifier(log_body=cfg.log_body)
    return EmailUserNotifier(sender=cfg.sender, log_body=cfg.log_body)


def _build_order_notifier(settings: Settings) -> OrderNotifierPort:
    cfg = settings.notifications
    if settings.backends.order_notifier == "sms":
        return SMSOrderNotifier(log_body=cfg.log_body)
    return EmailOrderNotifier(sender=cfg.sender, log_body=cfg.log_body)


def _build_logger(settings: Settings, base_dir: Path) -> LoggerPort:
    cfg = settings.logging
    if settings.backends.logger == "file":
        return FileLogger(base_dir / cfg.file_path, name=f"{cfg.name}.file", level=cfg.level)
    return ConsoleLogger(name=f"{cfg.name}.console", level=cfg.level)


def _build_validator(settings: Settings) -> OrderValidatorPort:
    if settings.backends.validator == "limits":
        return LimitsOrderValidator(settings.validation)
    return OrderValidator()


def _build_pricing(settings: Settings) -> PricingPort:
    if settings.backends.pricing == "full_price":
        return FullPricePricing()
    return DiscountPricing(settings.pricing.discount_rate)
