"""
Console email sender adapter - Implements EmailSender protocol.

This module provides a console-based implementation of the domain's
email sender port, logging messages to stdout for local development.
"""

import logging

from src.domain.models import Attachment, Recipient

logger = logging.getLogger(__name__)


class ConsoleEmailSender:
    """
    Implements EmailSender protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    For demo/development purposes - the HTML body is not printed.
    """

    def send(
        self,
        to: Recipient,
        subject: str,
        html_body: str,
        attachment: Attachment | None = None,
    ) -> None:
        """
        Log the message envelope to console (simulates email delivery).

        Logged at INFO level to be visible in the service logs.

        Args:
            to: Recipient address and display name
            subject: Message subject
            html_body: Rendered HTML body
            attachment: Optional binary attachment
        """
        logger.info("[EMAIL] To: %s Subject: %s", to.email, subject)
        if attachment is not None:
            logger.info(
                "[EMAIL] Attachment: %s (%d bytes)", attachment.filename, len(attachment.content)
            )

    def close(self) -> None:
        """Nothing to release."""
