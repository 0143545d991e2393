"""
Bulk roster export - Spreadsheet of all participants mailed to the admin.

Runs detached from the request that triggered it, so it owns its error
boundary: every failure is logged here and never re-raised.
"""

import logging
from dataclasses import dataclass

from .department import classify
from .emails import export_subject, render_export_email
from .models import Attachment, ParticipantRecord, Recipient
from .ports import EmailSender, ParticipantRepository, RosterSerializer

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = ["name", "email", "usn", "department", "year"]


def export_rows(records: list[ParticipantRecord]) -> list[dict[str, str]]:
    """Project records onto EXPORT_COLUMNS, classifying each department."""
    return [
        {
            "name": record.name,
            "email": record.email,
            "usn": record.usn,
            "department": classify(record.usn),
            "year": record.year,
        }
        for record in records
    ]


@dataclass
class RosterExportNotifier:
    """
    Serializes the full roster and emails it to the administrator.

    The repository is used only when no snapshot is passed in. A background
    job holds its own repository handle, which acquires its own pooled
    connection independent of the request that dispatched it.
    """

    repository: ParticipantRepository
    email_sender: EmailSender
    serializer: RosterSerializer
    admin_recipient: Recipient
    event_name: str

    def export_and_notify(self, records: list[ParticipantRecord] | None = None) -> None:
        """
        Build the roster spreadsheet and send it to the admin recipient.

        Fire-and-forget: errors are logged, never propagated.
        """
        try:
            if records is None:
                records = self.repository.list_all()

            content = self.serializer.serialize(export_rows(records), EXPORT_COLUMNS)
            self.email_sender.send(
                to=self.admin_recipient,
                subject=export_subject(self.event_name),
                html_body=render_export_email(len(records), self.event_name),
                attachment=Attachment(filename=self.serializer.filename, content=content),
            )
        except Exception:
            logger.exception("Roster export to %s failed", self.admin_recipient.email)
            return

        logger.info(
            "Roster export with %d participant(s) sent to %s",
            len(records),
            self.admin_recipient.email,
        )
