"""
Domain models - Value types shared by the domain and its adapters.

Plain dataclasses and enums, no framework imports.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Year(str, Enum):
    """Year of study offered by the registration form."""

    FIRST = "1"
    SECOND = "2"
    THIRD = "3"
    FOURTH = "4"


class AdmissionStatus(Enum):
    """
    Result of one admission attempt.

    Used by RegistrationService.admit() to report acceptance or the
    specific reason a registration was not persisted.
    """

    ACCEPTED = "accepted"
    REJECTED_FULL = "rejected_full"
    REJECTED_DUPLICATE = "rejected_duplicate"
    FAILED = "failed"


@dataclass(frozen=True)
class ParticipantInput:
    """Registration candidate as submitted by the form."""

    name: str
    usn: str
    email: str
    year: str
    phone: str


@dataclass(frozen=True)
class ParticipantRecord:
    """Persisted registration. Immutable once written."""

    id: str
    name: str
    usn: str
    email: str
    year: str
    phone: str
    registered_at: datetime | None = None


@dataclass(frozen=True)
class RegistrationOutcome:
    """Transient result of RegistrationService.admit(). Never persisted."""

    status: AdmissionStatus
    record: ParticipantRecord | None = None
    error: Exception | None = None

    @property
    def accepted(self) -> bool:
        return self.status is AdmissionStatus.ACCEPTED


@dataclass(frozen=True)
class Recipient:
    """Email recipient."""

    email: str
    name: str | None = None


@dataclass(frozen=True)
class Attachment:
    """Binary email attachment."""

    filename: str
    content: bytes = field(repr=False)
