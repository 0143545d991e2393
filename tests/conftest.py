"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- In-memory participant repository (fake for the ParticipantRepository port)
- Recording email sender and background dispatcher
- A fully wired RegistrationService over the fakes
- PostgreSQL pool for integration tests (skipped when the database is down)
"""

from collections.abc import Generator

import pytest
from psycopg_pool import ConnectionPool, PoolTimeout

from src.adapters.repository.postgres import run_migrations
from src.config.settings import get_settings
from src.domain.models import Recipient
from src.domain.registration import RegistrationService
from src.domain.roster_export import RosterExportNotifier
from tests.fakes import (
    EVENT,
    InMemoryParticipantRepository,
    RecordingDispatcher,
    RecordingEmailSender,
    StubSerializer,
)


@pytest.fixture
def repository() -> InMemoryParticipantRepository:
    return InMemoryParticipantRepository()


@pytest.fixture
def email_sender() -> RecordingEmailSender:
    return RecordingEmailSender()


@pytest.fixture
def dispatcher() -> RecordingDispatcher:
    return RecordingDispatcher()


@pytest.fixture
def serializer() -> StubSerializer:
    return StubSerializer()


@pytest.fixture
def export_notifier(
    repository: InMemoryParticipantRepository,
    email_sender: RecordingEmailSender,
    serializer: StubSerializer,
) -> RosterExportNotifier:
    return RosterExportNotifier(
        repository=repository,
        email_sender=email_sender,
        serializer=serializer,
        admin_recipient=Recipient(email="admin@example.com", name="Workshop Team"),
        event_name=EVENT.name,
    )


@pytest.fixture
def service(
    repository: InMemoryParticipantRepository,
    email_sender: RecordingEmailSender,
    dispatcher: RecordingDispatcher,
    export_notifier: RosterExportNotifier,
) -> RegistrationService:
    return RegistrationService(
        repository=repository,
        email_sender=email_sender,
        dispatcher=dispatcher,
        export_notifier=export_notifier,
        event=EVENT,
    )


@pytest.fixture(scope="session")
def pool() -> Generator[ConnectionPool, None, None]:
    """
    Create a migrated connection pool for DATABASE_URL.

    Integration tests run against a local PostgreSQL; they are
    skipped when it is unreachable.
    """
    settings = get_settings()
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=1,
        max_size=10,
        open=True,
    )
    try:
        pool.wait(timeout=3.0)
    except PoolTimeout:
        pool.close()
        pytest.skip(f"PostgreSQL not reachable at {settings.database_url}")

    run_migrations(pool)
    yield pool
    pool.close()


@pytest.fixture
def clean_database(pool: ConnectionPool) -> Generator[None, None, None]:
    """Empty participant and notice tables before each test."""
    with pool.connection() as conn:
        conn.execute("DELETE FROM participants")
        conn.execute("DELETE FROM roster_notices")
        conn.commit()
    yield
