"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic for workshop registration:
the capacity-gated admission flow, department classification, the admin
roster view and the one-time roster export. It defines its own port
interfaces for infrastructure abstraction.
"""

from .department import classify
from .exceptions import (
    CapacityExceeded,
    DuplicateRegistrant,
    NotificationFailure,
    PersistenceFailure,
    RegistrationError,
)
from .models import (
    AdmissionStatus,
    Attachment,
    ParticipantInput,
    ParticipantRecord,
    Recipient,
    RegistrationOutcome,
    Year,
)
from .ports import EmailSender, ParticipantRepository, RosterSerializer, TaskDispatcher
from .registration import RegistrationService
from .roster import RosterQuery
from .roster_export import RosterExportNotifier

__all__ = [
    "AdmissionStatus",
    "Attachment",
    "CapacityExceeded",
    "DuplicateRegistrant",
    "EmailSender",
    "NotificationFailure",
    "ParticipantInput",
    "ParticipantRecord",
    "ParticipantRepository",
    "PersistenceFailure",
    "Recipient",
    "RegistrationError",
    "RegistrationOutcome",
    "RegistrationService",
    "RosterExportNotifier",
    "RosterQuery",
    "RosterSerializer",
    "TaskDispatcher",
    "Year",
    "classify",
]
