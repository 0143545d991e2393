"""
Domain exceptions - Semantic error types for registration.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.

Expected, user-facing rejections:
- CapacityExceeded: the roster already holds `capacity` participants
- DuplicateRegistrant: the email or USN is already registered

Internal failures:
- PersistenceFailure: the participant store could not be read or written
- NotificationFailure: an email could not be delivered (never surfaced)
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class CapacityExceeded(RegistrationError):
    """Workshop is full."""

    pass


class DuplicateRegistrant(RegistrationError):
    """Email or USN already present in the roster."""

    pass


class PersistenceFailure(RegistrationError):
    """Participant store unreachable or operation failed."""

    pass


class NotificationFailure(RegistrationError):
    """Transactional email could not be delivered."""

    pass
