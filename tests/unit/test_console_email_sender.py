"""
Unit tests for ConsoleEmailSender adapter.

Tests verify the console email sender implements EmailSender protocol
and logs message envelopes in the correct format.
"""

import logging

import pytest

from src.adapters.smtp.console import ConsoleEmailSender
from src.domain.models import Attachment, Recipient


class TestConsoleEmailSenderProtocol:
    """Tests for EmailSender protocol compliance."""

    def test_implements_email_sender_protocol(self) -> None:
        """ConsoleEmailSender implements EmailSender protocol."""
        from src.domain.ports import EmailSender

        sender = ConsoleEmailSender()
        assert hasattr(sender, "send")
        assert callable(sender.send)

        def accepts_email_sender(s: EmailSender) -> None:
            pass

        accepts_email_sender(sender)

    def test_no_explicit_inheritance(self) -> None:
        """ConsoleEmailSender uses structural subtyping, not inheritance."""
        bases = ConsoleEmailSender.__bases__
        assert bases == (object,), f"Expected only object as base, got {bases}"


class TestSend:
    """Tests for send method."""

    def test_send_logs_one_info_record(self, caplog: pytest.LogCaptureFixture) -> None:
        """Message without attachment is logged once at INFO level."""
        sender = ConsoleEmailSender()

        with caplog.at_level(logging.INFO):
            sender.send(Recipient(email="a@sode-edu.in", name="Asha"), "Welcome", "<p>hi</p>")

        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.INFO

    def test_send_format(self, caplog: pytest.LogCaptureFixture) -> None:
        """Log format: [EMAIL] To: ... Subject: ..."""
        sender = ConsoleEmailSender()

        with caplog.at_level(logging.INFO):
            sender.send(Recipient(email="a@sode-edu.in"), "Welcome aboard", "<p>hi</p>")

        assert caplog.records[0].getMessage() == "[EMAIL] To: a@sode-edu.in Subject: Welcome aboard"

    def test_body_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        sender = ConsoleEmailSender()

        with caplog.at_level(logging.INFO):
            sender.send(Recipient(email="a@sode-edu.in"), "Welcome", "<p>secret body</p>")

        assert "secret body" not in caplog.text

    def test_attachment_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Attachment name and size are logged."""
        sender = ConsoleEmailSender()

        with caplog.at_level(logging.INFO):
            sender.send(
                Recipient(email="admin@example.com"),
                "Roster",
                "<p>full</p>",
                Attachment(filename="participants.xlsx", content=b"12345"),
            )

        assert len(caplog.records) == 2
        assert caplog.records[1].getMessage() == "[EMAIL] Attachment: participants.xlsx (5 bytes)"
