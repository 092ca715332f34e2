"""
Dev Channel Base.

Shared behavior of the dev notifiers: log the message instead of delivering
it and keep an in-memory record for test assertions.

Key behaviors:
- Returns SKIPPED status (not SENT)
- A missing recipient address is a FAILED result, never an exception
- Supports configurable verbosity
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import ClassVar
from uuid import uuid4

from plugpipe.core.ports.notification import NotificationError, NotificationResult

logger = logging.getLogger(__name__)


@dataclass
class SentMessage:
    """Record of a logged message for test assertions."""

    id: str
    channel: str
    recipient: str
    subject: str
    body: str
    logged_at: datetime
    sender: str | None = None


@dataclass
class DevChannel:
    """Logs messages for one channel and stores them in memory."""

    channel: ClassVar[str] = "dev"

    # In-memory storage for test assertions
    sent_messages: list[SentMessage] = field(default_factory=list)

    # Configuration
    sender: str | None = None
    log_level: int = logging.INFO
    log_body: bool = True
    body_preview_length: int = 100

    def _deliver(self, recipient: str | None, subject: str, body: str) -> NotificationResult:
        """Record and log one message; convert delivery errors to a result."""
        try:
            message_id = self._record(recipient, subject, body)
        except NotificationError as e:
            logger.warning(str(e))
            return NotificationResult.failed(self.channel, e.recipient, e.error)
        return NotificationResult.skipped(self.channel, recipient or "", message_id)

    def _record(self, recipient: str | None, subject: str, body: str) -> str:
        if not recipient:
            raise NotificationError(self.channel, "<unknown>", "no recipient address")

        message_id = f"{self.channel}-{uuid4().hex[:12]}"
        self.sent_messages.append(
            SentMessage(
                id=message_id,
                channel=self.channel,
                recipient=recipient,
                subject=subject,
                body=body,
                logged_at=datetime.now(UTC),
                sender=self.sender,
            )
        )
        self._log_message(recipient, subject, body, message_id)
        return message_id

    def _log_message(self, recipient: str, subject: str, body: str, message_id: str) -> None:
        parts = [f"{self.channel.upper()} (dev): To={recipient}"]
        if self.sender:
            parts.append(f"From={self.sender}")
        if subject:
            parts.append(f"Subject={subject}")

        if self.log_body and body:
            preview = body[: self.body_preview_length]
            if len(body) > self.body_preview_length:
                preview += "..."
            parts.append(f"Body={preview}")

        parts.append(f"MessageID={message_id}")
        logger.log(self.log_level, ", ".join(parts))

    # --- Test Helper Methods ---

    def get_last_message(self) -> SentMessage | None:
        """Get the most recently logged message."""
        return self.sent_messages[-1] if self.sent_messages else None

    def get_messages_to(self, recipient: str) -> list[SentMessage]:
        """Get all messages logged to a specific recipient."""
        return [m for m in self.sent_messages if m.recipient == recipient]

    def clear(self) -> None:
        """Clear all stored messages (for test isolation)."""
        self.sent_messages.clear()

    @property
    def message_count(self) -> int:
        return len(self.sent_messages)
