"""
Brevo email sender adapter - Implements EmailSender protocol.

Sends transactional email through the Brevo (formerly Sendinblue) HTTP API
using httpx. Attachments are sent base64-encoded inline in the JSON payload.
"""

import base64
import logging

import httpx

from src.domain.exceptions import NotificationFailure
from src.domain.models import Attachment, Recipient

logger = logging.getLogger(__name__)


class BrevoEmailSender:
    """
    Implements EmailSender protocol via the Brevo transactional email API.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Any transport error or non-2xx response raises NotificationFailure.
    """

    def __init__(
        self,
        api_key: str,
        sender_email: str,
        sender_name: str,
        api_url: str = "https://api.brevo.com/v3/smtp/email",
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("Brevo API key is not configured")

        self._api_key = api_key
        self._sender = {"name": sender_name, "email": sender_email}
        self._api_url = api_url
        self._client = client or httpx.Client(timeout=timeout)

    def build_payload(
        self,
        to: Recipient,
        subject: str,
        html_body: str,
        attachment: Attachment | None = None,
    ) -> dict:
        recipient = {"email": to.email}
        if to.name:
            recipient["name"] = to.name

        payload = {
            "sender": self._sender,
            "to": [recipient],
            "subject": subject,
            "htmlContent": html_body,
        }
        if attachment is not None:
            payload["attachment"] = [
                {
                    "name": attachment.filename,
                    "content": base64.b64encode(attachment.content).decode("ascii"),
                }
            ]
        return payload

    def send(
        self,
        to: Recipient,
        subject: str,
        html_body: str,
        attachment: Attachment | None = None,
    ) -> None:
        payload = self.build_payload(to, subject, html_body, attachment)

        try:
            response = self._client.post(
                self._api_url,
                json=payload,
                headers={"api-key": self._api_key, "accept": "application/json"},
            )
        except httpx.HTTPError as e:
            raise NotificationFailure(f"Brevo request failed: {e}") from e

        if response.is_error:
            raise NotificationFailure(
                f"Brevo API error {response.status_code}: {response.text}"
            )

        logger.info("Email sent to %s via Brevo", to.email)

    def close(self) -> None:
        self._client.close()
