"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from collections.abc import Callable
from functools import lru_cache
from typing import Any

from fastapi import BackgroundTasks, Request
from psycopg_pool import ConnectionPool

from src.adapters.export.xlsx import XlsxRosterSerializer
from src.adapters.repository.postgres import PostgresParticipantRepository
from src.adapters.smtp.brevo import BrevoEmailSender
from src.adapters.smtp.console import ConsoleEmailSender
from src.config.settings import Settings, get_settings
from src.domain.emails import EventDetails
from src.domain.models import Recipient
from src.domain.ports import EmailSender
from src.domain.registration import RegistrationService
from src.domain.roster import RosterQuery
from src.domain.roster_export import RosterExportNotifier

# Module-level singleton - XlsxRosterSerializer is stateless
_serializer = XlsxRosterSerializer()


class BackgroundTasksDispatcher:
    """
    Implements TaskDispatcher protocol via FastAPI BackgroundTasks.

    Tasks run after the response has been sent, so the caller never
    waits on them.
    """

    def __init__(self, background_tasks: BackgroundTasks) -> None:
        self._background_tasks = background_tasks

    def dispatch(self, func: Callable[..., Any], *args: Any) -> None:
        self._background_tasks.add_task(func, *args)


def build_email_sender(settings: Settings) -> EmailSender:
    """Create the email sender selected by EMAIL_BACKEND."""
    if settings.email_backend == "brevo":
        return BrevoEmailSender(
            api_key=settings.brevo_api_key or "",
            sender_email=settings.sender_email,
            sender_name=settings.sender_name,
            api_url=settings.brevo_api_url,
            timeout=settings.email_timeout_seconds,
        )
    return ConsoleEmailSender()


def build_event_details(settings: Settings) -> EventDetails:
    return EventDetails(
        name=settings.event_name,
        date=settings.event_date,
        time=settings.event_time,
        venue=settings.event_venue,
        website=settings.event_website,
        contact_phone=settings.contact_phone,
        telegram_url=settings.telegram_url,
        whatsapp_url=settings.whatsapp_url,
    )


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresParticipantRepository:
    """Create repository with connection pool from app state."""
    pool = get_pool(request)
    return PostgresParticipantRepository(pool)


@lru_cache
def get_email_sender() -> EmailSender:
    """Get the configured email sender (singleton)."""
    return build_email_sender(get_settings())


def close_email_sender() -> None:
    """Close the cached email sender, if one was created, and drop it."""
    if get_email_sender.cache_info().currsize:
        get_email_sender().close()
        get_email_sender.cache_clear()


def get_capacity() -> int:
    """Configured capacity ceiling."""
    return get_settings().capacity


def get_export_notifier(request: Request) -> RosterExportNotifier:
    """
    Create the roster export notifier.

    Holds its own repository so the background job reads the roster
    through a fresh pooled connection.
    """
    settings = get_settings()
    return RosterExportNotifier(
        repository=get_repository(request),
        email_sender=get_email_sender(),
        serializer=_serializer,
        admin_recipient=Recipient(email=settings.admin_email),
        event_name=settings.event_name,
    )


def get_registration_service(
    request: Request, background_tasks: BackgroundTasks
) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the repository, email sender, background dispatcher
    and roster export notifier for the domain service.
    """
    return RegistrationService(
        repository=get_repository(request),
        email_sender=get_email_sender(),
        dispatcher=BackgroundTasksDispatcher(background_tasks),
        export_notifier=get_export_notifier(request),
        event=build_event_details(get_settings()),
    )


def get_roster_query(request: Request) -> RosterQuery:
    """Create the read-only roster query for the admin view."""
    return RosterQuery(repository=get_repository(request))
