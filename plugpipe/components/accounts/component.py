"""
Accounts component - user creation and lookup.

create_user is best-effort: once the operation starts it never raises to
the caller. A failed save or a failed welcome notice is reported through
the logger port and the call returns normally. A user that was saved but
not notified stays saved; that partial outcome is visible only in the log.
No retries.
"""

from __future__ import annotations

from plugpipe.core.ports.logger import LoggerPort
from plugpipe.core.ports.notification import UserNotifierPort
from plugpipe.core.ports.repo import UserRepoPort
from plugpipe.domain.entities import User

DEFAULT_WELCOME_TEMPLATE = "Welcome, {name}! Your account was created successfully."


class UserService:
    """Creates and finds users through injected repo, notifier and logger ports."""

    def __init__(
        self,
        repo: UserRepoPort,
        notifier: UserNotifierPort,
        logger: LoggerPort,
        *,
        welcome_template: str = DEFAULT_WELCOME_TEMPLATE,
    ) -> None:
        self._repo = repo
        self._notifier = notifier
        self._logger = logger
        self._welcome_template = welcome_template

    def create_user(
        self, user_id: int, name: str, email: str, phone: str | None = None
    ) -> None:
        """Save a new user and send the welcome notice."""
        self._logger.info(f"Creating user {user_id}")

        try:
            user = User(id=user_id, name=name, email=email, phone=phone)
            saved = self._repo.save(user)
            if not saved.ok:
                self._logger.error(f"Error creating user {user_id}: save failed ({saved.error})")
                return

            sent = self._notifier.send(user, self._welcome_template.format(name=name))
            if not sent.ok:
                self._logger.error(
                    f"Error creating user {user_id}: welcome notice failed ({sent.error})"
                )
                return
        except Exception as e:
            # Invalid input or a backend that broke its no-raise contract
            self._logger.error(f"Error creating user {user_id}: {e}")
            return

        self._logger.info(f"User {user_id} created")

    def find_user(self, user_id: int) -> User | None:
        """Look a user up; the repo's answer is returned unchanged."""
        self._logger.info(f"Searching user {user_id}")
        return self._repo.find_by_id(user_id)
