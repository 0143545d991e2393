"""
Registration domain service - Capacity-gated admission of participants.

This module contains the core business logic for workshop registration:
deciding whether a signup is accepted, persisting it, and firing the
notifications that follow.

Admission Flow (strict order, each gate short-circuits)
=======================================================

1. Capacity gate    count >= capacity           -> REJECTED_FULL
2. Uniqueness gate  email OR usn already stored -> REJECTED_DUPLICATE
3. Persist          insert fails                -> FAILED
4. Threshold check  count_before + 1 == capacity -> dispatch roster export
5. Welcome email    failure logged only
6.                                              -> ACCEPTED

Only steps 1-3 decide the outcome. Notification failures (4, 5) are
soft: they are logged and never change the result.

Concurrency note: steps 1-3 are not isolated across requests. Two
concurrent admissions can both pass the capacity gate, so slight
overbooking is possible and accepted. Duplicate rows are still
prevented by the store's unique constraints, which surface as
DuplicateRegistrant on insert. The roster export is guarded by a
one-shot claim in the store so it fires at most once per capacity.
"""

import logging
from dataclasses import dataclass

from .emails import EventDetails, render_welcome_email, welcome_subject
from .exceptions import (
    CapacityExceeded,
    DuplicateRegistrant,
    NotificationFailure,
    PersistenceFailure,
)
from .models import (
    AdmissionStatus,
    ParticipantInput,
    ParticipantRecord,
    Recipient,
    RegistrationOutcome,
)
from .ports import EmailSender, ParticipantRepository, TaskDispatcher
from .roster_export import RosterExportNotifier

logger = logging.getLogger(__name__)


def remaining_seats(repository: ParticipantRepository, capacity: int) -> int:
    """Seats left before the capacity gate closes. Never negative."""
    return max(0, capacity - repository.count())


@dataclass
class RegistrationService:
    """
    Domain service for workshop registration.

    Orchestrates normalization, the capacity and uniqueness gates,
    persistence, and the follow-up notifications.
    """

    repository: ParticipantRepository
    email_sender: EmailSender
    dispatcher: TaskDispatcher
    export_notifier: RosterExportNotifier
    event: EventDetails

    def admit(self, candidate: ParticipantInput, capacity: int) -> RegistrationOutcome:
        """
        Decide whether a candidate is accepted, and persist them if so.

        Args:
            candidate: Submitted registration (usn/email are normalized here)
            capacity: Maximum number of accepted registrations

        Returns:
            RegistrationOutcome describing acceptance or the rejection reason
        """
        candidate = self._normalize(candidate)

        try:
            count_before = self.repository.count()
            if count_before >= capacity:
                logger.info("Registration rejected, workshop full (%d/%d)", count_before, capacity)
                return RegistrationOutcome(
                    AdmissionStatus.REJECTED_FULL,
                    error=CapacityExceeded(f"capacity {capacity} reached"),
                )

            existing = self.repository.find_by_email_or_usn(candidate.email, candidate.usn)
            if existing is not None:
                logger.info("Registration rejected, already registered: %s", candidate.usn)
                return RegistrationOutcome(
                    AdmissionStatus.REJECTED_DUPLICATE, error=DuplicateRegistrant(candidate.usn)
                )

            record = self.repository.insert(candidate)
        except DuplicateRegistrant as e:
            # Lost an insert race against a concurrent registration
            logger.info("Registration rejected on insert, already registered: %s", candidate.usn)
            return RegistrationOutcome(AdmissionStatus.REJECTED_DUPLICATE, error=e)
        except PersistenceFailure as e:
            logger.error("Registration failed for %s: %s", candidate.usn, e)
            return RegistrationOutcome(AdmissionStatus.FAILED, error=e)

        logger.info("Registered %s (%d/%d)", record.usn, count_before + 1, capacity)

        if count_before + 1 == capacity:
            self._trigger_roster_export(capacity)

        self._send_welcome_email(record)
        return RegistrationOutcome(AdmissionStatus.ACCEPTED, record=record)

    def remaining_seats(self, capacity: int) -> int:
        return remaining_seats(self.repository, capacity)

    def _trigger_roster_export(self, capacity: int) -> None:
        """
        Dispatch the one-time roster export in the background.

        The store-side claim makes the trigger one-shot: a repeated or
        concurrent exact-capacity insert cannot fire a second export.
        A claim whose dispatch fails is released again.
        """
        try:
            claimed = self.repository.claim_capacity_notice(capacity)
        except Exception:
            logger.exception("Could not dispatch roster export for capacity %d", capacity)
            return

        if not claimed:
            logger.info("Roster export for capacity %d already dispatched", capacity)
            return

        try:
            self.dispatcher.dispatch(self.export_notifier.export_and_notify)
        except Exception:
            logger.exception("Could not dispatch roster export for capacity %d", capacity)
            self._release_claim(capacity)
            return

        logger.info("Roster reached capacity %d, export dispatched", capacity)

    def _release_claim(self, capacity: int) -> None:
        try:
            self.repository.release_capacity_notice(capacity)
        except PersistenceFailure as e:
            logger.error("Could not release roster export claim for %d: %s", capacity, e)

    def _send_welcome_email(self, record: ParticipantRecord) -> None:
        try:
            self.email_sender.send(
                to=Recipient(email=record.email, name=record.name),
                subject=welcome_subject(self.event),
                html_body=render_welcome_email(record, self.event),
            )
        except NotificationFailure as e:
            logger.error("Welcome email to %s failed: %s", record.email, e)

    def _normalize(self, candidate: ParticipantInput) -> ParticipantInput:
        """
        Normalize identifiers for consistent storage and lookup.

        Applies: strip on every field, uppercase usn, lowercase email
        """
        return ParticipantInput(
            name=candidate.name.strip(),
            usn=candidate.usn.strip().upper(),
            email=candidate.email.strip().lower(),
            year=candidate.year.strip(),
            phone=candidate.phone.strip(),
        )
