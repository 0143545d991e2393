"""
Admin roster view - Read-side listing and summary of participants.

Departments are computed on read via classify(), so a change to the
classification rule reclassifies every historical record.
"""

from collections import Counter
from dataclasses import dataclass

from .department import classify
from .models import ParticipantRecord
from .ports import ParticipantRepository
from .registration import remaining_seats


def roster_entry(record: ParticipantRecord) -> dict[str, str]:
    """Flatten a record into a roster row with its derived department."""
    return {
        "id": record.id,
        "name": record.name,
        "email": record.email,
        "usn": record.usn,
        "year": record.year,
        "phone": record.phone,
        "department": classify(record.usn),
    }


def filter_roster(
    entries: list[dict[str, str]],
    department: str | None = None,
    year: str | None = None,
    search: str | None = None,
) -> list[dict[str, str]]:
    """
    Filter roster rows the way the admin dashboard does.

    - department: exact label match
    - year: exact match
    - search: case-insensitive substring of name or email
    """
    needle = search.strip().lower() if search else ""

    def keep(entry: dict[str, str]) -> bool:
        if department and entry["department"] != department:
            return False
        if year and entry["year"] != year:
            return False
        if needle and needle not in entry["name"].lower() and needle not in entry["email"].lower():
            return False
        return True

    return [entry for entry in entries if keep(entry)]


@dataclass(frozen=True)
class RosterSummary:
    total: int
    capacity: int
    remaining_seats: int
    departments: dict[str, int]


@dataclass
class RosterQuery:
    """Read-only queries backing the admin dashboard."""

    repository: ParticipantRepository

    def list_participants(
        self,
        department: str | None = None,
        year: str | None = None,
        search: str | None = None,
    ) -> list[dict[str, str]]:
        entries = [roster_entry(record) for record in self.repository.list_all()]
        return filter_roster(entries, department=department, year=year, search=search)

    def remaining_seats(self, capacity: int) -> int:
        return remaining_seats(self.repository, capacity)

    def summarize(self, capacity: int) -> RosterSummary:
        records = self.repository.list_all()
        departments = Counter(classify(record.usn) for record in records)
        return RosterSummary(
            total=len(records),
            capacity=capacity,
            remaining_seats=max(0, capacity - len(records)),
            departments=dict(sorted(departments.items())),
        )
