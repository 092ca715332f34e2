"""
Accounts component unit tests.

Tests for user creation, best-effort failure handling and lookup.
"""

from __future__ import annotations

from typing import Any

import pytest

from plugpipe.adapters.dev_email import EmailUserNotifier
from plugpipe.adapters.dev_sms import SMSUserNotifier
from plugpipe.adapters.simulated_db import MySQLUserRepo, PostgreSQLUserRepo
from plugpipe.components.accounts import UserService
from plugpipe.core.ports.notification import NotificationResult
from plugpipe.core.ports.repo import SaveResult
from plugpipe.domain.entities import User

# --- Mock Implementations ---


class MockUserRepo:
    """In-memory user repository that can be told to fail."""

    def __init__(self, calls: list[str], fail: bool = False, explode: bool = False) -> None:
        self._calls = calls
        self._fail = fail
        self._explode = explode
        self.users: dict[int, User] = {}

    def find_by_id(self, user_id: int) -> User | None:
        self._calls.append("repo.find_by_id")
        return self.users.get(user_id)

    def save(self, user: User) -> SaveResult:
        self._calls.append("repo.save")
        if self._explode:
            raise RuntimeError("connection reset")
        if self._fail:
            return SaveResult.failed("disk full")
        self.users[user.id] = user
        return SaveResult.saved()


class MockNotifier:
    """Records sent messages; can be told to fail."""

    def __init__(self, calls: list[str], fail: bool = False, explode: bool = False) -> None:
        self._calls = calls
        self._fail = fail
        self._explode = explode
        self.sent: list[tuple[User, str]] = []

    def send(self, user: User, message: str) -> NotificationResult:
        self._calls.append("notifier.send")
        if self._explode:
            raise RuntimeError("gateway timeout")
        if self._fail:
            return NotificationResult.failed("mock", user.email, "mailbox unavailable")
        self.sent.append((user, message))
        return NotificationResult.success("mock", user.email)


class MockLogger:
    """Collects log lines per level."""

    def __init__(self, calls: list[str]) -> None:
        self._calls = calls
        self.infos: list[str] = []
        self.errors: list[str] = []

    def info(self, message: str) -> None:
        self._calls.append("logger.info")
        self.infos.append(message)

    def error(self, message: str) -> None:
        self._calls.append("logger.error")
        self.errors.append(message)


class Recorder:
    """Wraps a real backend and records every method called on it."""

    def __init__(self, name: str, target: Any, calls: list[str]) -> None:
        self._name = name
        self._target = target
        self._calls = calls

    def __getattr__(self, attr: str) -> Any:
        method = getattr(self._target, attr)

        def wrapper(*args: Any, **kwargs: Any) -> Any:
            self._calls.append(f"{self._name}.{attr}")
            return method(*args, **kwargs)

        return wrapper


# --- Fixtures ---


@pytest.fixture
def calls() -> list[str]:
    return []


@pytest.fixture
def repo(calls: list[str]) -> MockUserRepo:
    return MockUserRepo(calls)


@pytest.fixture
def notifier(calls: list[str]) -> MockNotifier:
    return MockNotifier(calls)


@pytest.fixture
def logger(calls: list[str]) -> MockLogger:
    return MockLogger(calls)


@pytest.fixture
def service(repo: MockUserRepo, notifier: MockNotifier, logger: MockLogger) -> UserService:
    return UserService(repo, notifier, logger)


# --- Create User Tests ---


class TestCreateUser:
    """Test the create_user sequence."""

    def test_create_user_call_sequence(self, service: UserService, calls: list[str]) -> None:
        """Log, save, notify, log - in that order."""
        service.create_user(1, "João Silva", "joao@example.com")

        assert calls == ["logger.info", "repo.save", "notifier.send", "logger.info"]

    def test_create_user_log_lines(self, service: UserService, logger: MockLogger) -> None:
        service.create_user(1, "João Silva", "joao@example.com")

        assert logger.infos == ["Creating user 1", "User 1 created"]
        assert logger.errors == []

    def test_create_user_saves_entity(self, service: UserService, repo: MockUserRepo) -> None:
        service.create_user(7, "Ana", "ana@example.com", phone="+5511999990000")

        assert repo.users[7] == User(
            id=7, name="Ana", email="ana@example.com", phone="+5511999990000"
        )

    def test_create_user_sends_welcome(self, service: UserService, notifier: MockNotifier) -> None:
        service.create_user(1, "João Silva", "joao@example.com")

        assert len(notifier.sent) == 1
        user, message = notifier.sent[0]
        assert user.id == 1
        assert message == "Welcome, João Silva! Your account was created successfully."

    def test_custom_welcome_template(
        self, repo: MockUserRepo, notifier: MockNotifier, logger: MockLogger
    ) -> None:
        service = UserService(repo, notifier, logger, welcome_template="Hi {name}")
        service.create_user(1, "Ana", "ana@example.com")

        assert notifier.sent[0][1] == "Hi Ana"

    def test_notified_user_is_the_saved_user(
        self, service: UserService, repo: MockUserRepo, notifier: MockNotifier
    ) -> None:
        service.create_user(3, "Ana", "ana@example.com")

        assert notifier.sent[0][0] == repo.users[3]


class TestCreateUserBestEffort:
    """Backend failures are logged, never raised."""

    def test_save_failure_is_logged_not_raised(
        self, calls: list[str], notifier: MockNotifier, logger: MockLogger
    ) -> None:
        service = UserService(MockUserRepo(calls, fail=True), notifier, logger)

        assert service.create_user(1, "Ana", "ana@example.com") is None

        assert calls == ["logger.info", "repo.save", "logger.error"]
        assert "Error creating user 1" in logger.errors[0]
        assert "disk full" in logger.errors[0]
        assert notifier.sent == []

    def test_notify_failure_keeps_saved_user(
        self, calls: list[str], repo: MockUserRepo, logger: MockLogger
    ) -> None:
        """Saved but not notified: accepted, visible only in the log."""
        service = UserService(repo, MockNotifier(calls, fail=True), logger)

        service.create_user(1, "Ana", "ana@example.com")

        assert 1 in repo.users
        assert calls == ["logger.info", "repo.save", "notifier.send", "logger.error"]
        assert "mailbox unavailable" in logger.errors[0]
        assert "User 1 created" not in logger.infos

    def test_raising_repo_is_contained(
        self, calls: list[str], notifier: MockNotifier, logger: MockLogger
    ) -> None:
        service = UserService(MockUserRepo(calls, explode=True), notifier, logger)

        service.create_user(1, "Ana", "ana@example.com")

        assert "connection reset" in logger.errors[0]
        assert notifier.sent == []

    def test_raising_notifier_is_contained(
        self, calls: list[str], repo: MockUserRepo, logger: MockLogger
    ) -> None:
        service = UserService(repo, MockNotifier(calls, explode=True), logger)

        service.create_user(1, "Ana", "ana@example.com")

        assert "gateway timeout" in logger.errors[0]
        assert 1 in repo.users

    @pytest.mark.parametrize(
        ("repo_mode", "notifier_mode"),
        [
            ({"fail": True}, {"fail": True}),
            ({"explode": True}, {"explode": True}),
            ({}, {"explode": True}),
            ({"fail": True}, {}),
        ],
    )
    def test_never_raises(
        self,
        calls: list[str],
        logger: MockLogger,
        repo_mode: dict[str, bool],
        notifier_mode: dict[str, bool],
    ) -> None:
        service = UserService(
            MockUserRepo(calls, **repo_mode), MockNotifier(calls, **notifier_mode), logger
        )

        service.create_user(9, "Ana", "ana@example.com")

        assert len(logger.errors) == 1

    def test_sms_notifier_failure_is_logged(
        self, calls: list[str], repo: MockUserRepo, logger: MockLogger
    ) -> None:
        """A real notifier's FAILED result takes the same path as a mock's."""
        service = UserService(repo, SMSUserNotifier(), logger)

        service.create_user(1, "", "ana@example.com")  # no phone, no name

        assert len(logger.errors) == 1
        assert "no recipient address" in logger.errors[0]

    def test_invalid_user_data_is_logged_not_raised(
        self, calls: list[str], repo: MockUserRepo, notifier: MockNotifier, logger: MockLogger
    ) -> None:
        service = UserService(repo, notifier, logger)

        service.create_user("not-a-number", "Ana", "ana@example.com")  # type: ignore[arg-type]

        assert calls == ["logger.info", "logger.error"]
        assert "Error creating user not-a-number" in logger.errors[0]
        assert repo.users == {}


# --- Find User Tests ---


class TestFindUser:
    """Test user lookup."""

    def test_find_user_logs_then_looks_up(
        self, service: UserService, repo: MockUserRepo, calls: list[str], logger: MockLogger
    ) -> None:
        service.find_user(5)

        assert calls == ["logger.info", "repo.find_by_id"]
        assert logger.infos == ["Searching user 5"]

    def test_find_user_returns_repo_result_unchanged(
        self, service: UserService, repo: MockUserRepo
    ) -> None:
        stored = User(id=5, name="Ana", email="ana@example.com")
        repo.users[5] = stored

        assert service.find_user(5) is stored

    def test_find_user_absent(self, service: UserService) -> None:
        assert service.find_user(404) is None


# --- Substitutability Tests ---


class TestSubstitutability:
    """Different backends for the same port leave the call sequence unchanged."""

    def _sequence(
        self, repo: Any, notifier: Any, phone: str | None = "+5511988887777"
    ) -> list[str]:
        calls: list[str] = []
        service = UserService(
            Recorder("repo", repo, calls),
            Recorder("notifier", notifier, calls),
            Recorder("logger", MockLogger([]), calls),
        )
        service.create_user(2, "Maria Santos", "maria@example.com", phone=phone)
        service.find_user(2)
        return calls

    def test_repos_are_interchangeable(self) -> None:
        mysql = self._sequence(MySQLUserRepo(), EmailUserNotifier())
        postgres = self._sequence(PostgreSQLUserRepo(), EmailUserNotifier())

        assert mysql == postgres
        assert mysql == [
            "logger.info",
            "repo.save",
            "notifier.send",
            "logger.info",
            "logger.info",
            "repo.find_by_id",
        ]

    def test_notifiers_are_interchangeable(self) -> None:
        email = self._sequence(MySQLUserRepo(), EmailUserNotifier())
        sms = self._sequence(MySQLUserRepo(), SMSUserNotifier())

        assert email == sms

    def test_notifiers_are_interchangeable_without_phone(self) -> None:
        email, sms = EmailUserNotifier(), SMSUserNotifier()

        email_calls = self._sequence(MySQLUserRepo(), email, phone=None)
        sms_calls = self._sequence(MySQLUserRepo(), sms, phone=None)

        assert email_calls == sms_calls
        assert "logger.error" not in sms_calls
        assert sms.sent_messages[0].recipient == "Maria Santos"

    def test_backend_effects_differ(self) -> None:
        """Only the backend's own simulated effect changes."""
        email, sms = EmailUserNotifier(), SMSUserNotifier()
        self._sequence(MySQLUserRepo(), email)
        self._sequence(MySQLUserRepo(), sms)

        assert email.sent_messages[0].recipient == "maria@example.com"
        assert sms.sent_messages[0].recipient == "+5511988887777"
