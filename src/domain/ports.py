"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from collections.abc import Callable
from typing import Any, Protocol

from .models import Attachment, ParticipantInput, ParticipantRecord, Recipient


class ParticipantRepository(Protocol):
    """Port interface for participant persistence."""

    def count(self) -> int:
        """
        Count registered participants.

        Raises:
            PersistenceFailure: If the store cannot be queried
        """
        ...

    def find_by_email_or_usn(self, email: str, usn: str) -> ParticipantRecord | None:
        """
        Find an existing participant whose email OR usn matches.

        Args:
            email: Normalized email address
            usn: Normalized (uppercase) USN

        Returns:
            The first matching record, or None if neither value is registered
        """
        ...

    def insert(self, candidate: ParticipantInput) -> ParticipantRecord:
        """
        Persist a new participant.

        Args:
            candidate: Normalized participant input

        Returns:
            The stored record with its store-assigned id

        Raises:
            DuplicateRegistrant: If a unique constraint rejects the row
            PersistenceFailure: If the store is unreachable or the insert fails
        """
        ...

    def list_all(self) -> list[ParticipantRecord]:
        """Return every participant, oldest registration first."""
        ...

    def claim_capacity_notice(self, capacity: int) -> bool:
        """
        Atomically claim the one-time "roster full" notice for a capacity.

        Returns:
            True exactly once per capacity value, False on every later call
        """
        ...

    def release_capacity_notice(self, capacity: int) -> None:
        """
        Give back a claim whose export could not be dispatched.

        A later exact-capacity insert may claim it again.
        """
        ...


class EmailSender(Protocol):
    """Port interface for transactional email delivery."""

    def send(
        self,
        to: Recipient,
        subject: str,
        html_body: str,
        attachment: Attachment | None = None,
    ) -> None:
        """
        Send one email to one recipient.

        Raises:
            NotificationFailure: If the message could not be delivered
        """
        ...

    def close(self) -> None:
        """Release any transport held by the sender."""
        ...


class RosterSerializer(Protocol):
    """Port interface for the tabular export builder."""

    filename: str

    def serialize(self, rows: list[dict[str, str]], columns: list[str]) -> bytes:
        """
        Serialize rows into a spreadsheet byte buffer.

        Args:
            rows: One mapping per participant, keyed by column name
            columns: Column order (also used as header row)
        """
        ...


class TaskDispatcher(Protocol):
    """Port interface for fire-and-forget background work."""

    def dispatch(self, func: Callable[..., Any], *args: Any) -> None:
        """Schedule func(*args) without waiting for it to complete."""
        ...
