"""Notifier registry: pluggable email dispatch.

Uses the fake email adapter by default; a real provider adapter can be
installed with set_notifier() at startup.
"""

from notifications.channel.email_port import Notifier
from notifications.channel.fake_email import FakeEmailNotifier

_current_notifier: Notifier | None = None


def get_notifier() -> Notifier:
    """Return the configured notifier. Defaults to FakeEmailNotifier."""
    global _current_notifier
    if _current_notifier is None:
        _current_notifier = FakeEmailNotifier()
    return _current_notifier


def set_notifier(notifier: Notifier) -> None:
    """Override the active notifier (useful for tests)."""
    global _current_notifier
    _current_notifier = notifier


def reset_notifier() -> None:
    """Reset to default notifier."""
    global _current_notifier
    _current_notifier = None
