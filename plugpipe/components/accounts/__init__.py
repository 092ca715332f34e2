"""Accounts component - user creation with best-effort welcome notice."""

from plugpipe.components.accounts.component import DEFAULT_WELCOME_TEMPLATE, UserService

__all__ = [
    "DEFAULT_WELCOME_TEMPLATE",
    "UserService",
]
