"""Fake email adapter: records sent emails for testing."""

from uuid import uuid4

from notifications.channel.email_port import Notifier


class FakeEmailNotifier(Notifier):
    """Email adapter that records messages in memory for test assertions."""

    def __init__(self):
        self.sent_emails: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Email delivery failed"
        self.last_error: str | None = None

    def configure(self, should_succeed: bool = True, failure_reason: str = "Email delivery failed"):
        """Configure the fake adapter behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    async def send_email(self, to: str, subject: str, body: str) -> bool:
        if not self.should_succeed:
            self.last_error = self.failure_reason
            return False

        self.sent_emails.append(
            {
                "message_id": f"email-{uuid4().hex[:12]}",
                "to": to,
                "subject": subject,
                "body": body,
            }
        )
        self.last_error = None
        return True

    def reset(self):
        """Clear sent emails (useful between tests)."""
        self.sent_emails.clear()
        self.should_succeed = True
        self.failure_reason = "Email delivery failed"
        self.last_error = None
