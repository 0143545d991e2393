"""
Test doubles for the domain ports.

In-memory or recording implementations of ParticipantRepository,
EmailSender, TaskDispatcher and RosterSerializer, plus input builders.
"""

import uuid
from collections.abc import Callable
from typing import Any

from src.domain.emails import EventDetails
from src.domain.exceptions import DuplicateRegistrant
from src.domain.models import Attachment, ParticipantInput, ParticipantRecord, Recipient


class InMemoryParticipantRepository:
    """ParticipantRepository fake backed by a list."""

    def __init__(self) -> None:
        self.records: list[ParticipantRecord] = []
        self.notices: set[int] = set()
        self.insert_calls = 0

    def count(self) -> int:
        return len(self.records)

    def find_by_email_or_usn(self, email: str, usn: str) -> ParticipantRecord | None:
        for record in self.records:
            if record.email == email or record.usn == usn:
                return record
        return None

    def insert(self, candidate: ParticipantInput) -> ParticipantRecord:
        self.insert_calls += 1
        if self.find_by_email_or_usn(candidate.email, candidate.usn) is not None:
            raise DuplicateRegistrant(candidate.usn)
        record = ParticipantRecord(
            id=str(uuid.uuid4()),
            name=candidate.name,
            usn=candidate.usn,
            email=candidate.email,
            year=candidate.year,
            phone=candidate.phone,
        )
        self.records.append(record)
        return record

    def list_all(self) -> list[ParticipantRecord]:
        return list(self.records)

    def claim_capacity_notice(self, capacity: int) -> bool:
        if capacity in self.notices:
            return False
        self.notices.add(capacity)
        return True

    def release_capacity_notice(self, capacity: int) -> None:
        self.notices.discard(capacity)


class RecordingEmailSender:
    """EmailSender fake that keeps every message."""

    def __init__(self) -> None:
        self.sent: list[dict[str, Any]] = []
        self.closed = False

    def send(
        self,
        to: Recipient,
        subject: str,
        html_body: str,
        attachment: Attachment | None = None,
    ) -> None:
        self.sent.append(
            {"to": to, "subject": subject, "html_body": html_body, "attachment": attachment}
        )

    def close(self) -> None:
        self.closed = True


class RecordingDispatcher:
    """TaskDispatcher fake that queues tasks until run_all() is called."""

    def __init__(self) -> None:
        self.tasks: list[tuple[Callable[..., Any], tuple[Any, ...]]] = []

    def dispatch(self, func: Callable[..., Any], *args: Any) -> None:
        self.tasks.append((func, args))

    def run_all(self) -> None:
        tasks, self.tasks = self.tasks, []
        for func, args in tasks:
            func(*args)


class StubSerializer:
    """RosterSerializer fake that records its input."""

    filename = "participants.xlsx"

    def __init__(self) -> None:
        self.calls: list[tuple[list[dict[str, str]], list[str]]] = []

    def serialize(self, rows: list[dict[str, str]], columns: list[str]) -> bytes:
        self.calls.append((rows, columns))
        return b"xlsx-bytes"


EVENT = EventDetails(
    name="LangChain Workshop",
    date="January 20th, 2024",
    time="9:00 AM - 4:00 PM",
    venue="CS Seminar Hall, 3rd Floor",
    website="https://langchain-workshop.vercel.app",
    contact_phone="+91 8867004280",
)


def make_participant(
    usn: str = "4MW21CS001",
    email: str | None = None,
    name: str = "Asha Rao",
    year: str = "3",
    phone: str = "9876543210",
) -> ParticipantInput:
    """Build a participant input; email defaults to one derived from usn."""
    if email is None:
        email = f"{usn.lower()}@sode-edu.in"
    return ParticipantInput(name=name, usn=usn, email=email, year=year, phone=phone)
