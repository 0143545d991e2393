"""
PostgreSQL repository adapter - Implements ParticipantRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Connection handling:
--------------------
Every operation borrows a connection from the pool in a `with` block, so the
connection is returned on every exit path (success, rejection, or error).
The pool outlives individual requests, which lets background jobs (the
roster export) acquire their own connections after the request has ended.

Error translation:
------------------
- UniqueViolation on insert -> DuplicateRegistrant (lost registration race)
- Any other psycopg.Error   -> PersistenceFailure
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import psycopg
from psycopg import errors
from psycopg_pool import ConnectionPool

from src.domain.exceptions import DuplicateRegistrant, PersistenceFailure
from src.domain.models import ParticipantInput, ParticipantRecord

logger = logging.getLogger(__name__)

_COLUMNS = "id::text, name, usn, email, year, phone, registered_at"


def _to_record(row: tuple) -> ParticipantRecord:
    return ParticipantRecord(
        id=row[0],
        name=row[1],
        usn=row[2],
        email=row[3],
        year=row[4],
        phone=row[5],
        registered_at=row[6],
    )


class PostgresParticipantRepository:
    """
    Implements ParticipantRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    @contextmanager
    def _cursor(self) -> Iterator[psycopg.Cursor]:
        """Borrow a pooled connection and translate driver errors."""
        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                yield cursor
        except errors.UniqueViolation as e:
            raise DuplicateRegistrant(str(e)) from e
        except psycopg.Error as e:
            raise PersistenceFailure(str(e)) from e

    def count(self) -> int:
        with self._cursor() as cursor:
            cursor.execute("SELECT COUNT(*) FROM participants")
            row = cursor.fetchone()
            return row[0]

    def find_by_email_or_usn(self, email: str, usn: str) -> ParticipantRecord | None:
        """
        Find a participant by email OR usn.

        Both values arrive normalized from the domain layer, so the
        comparison is a plain equality on the unique columns.
        """
        sql = f"""
            SELECT {_COLUMNS}
            FROM participants
            WHERE email = %s OR usn = %s
            LIMIT 1
        """

        with self._cursor() as cursor:
            cursor.execute(sql, (email, usn))
            row = cursor.fetchone()
            return _to_record(row) if row is not None else None

    def insert(self, candidate: ParticipantInput) -> ParticipantRecord:
        """
        Insert a new participant and return the stored row.

        The UNIQUE constraints on email and usn reject a concurrent duplicate
        that slipped past the domain's uniqueness gate.
        """
        sql = f"""
            INSERT INTO participants (name, usn, email, year, phone, registered_at)
            VALUES (%s, %s, %s, %s, %s, NOW())
            RETURNING {_COLUMNS}
        """

        with self._cursor() as cursor:
            cursor.execute(
                sql,
                (candidate.name, candidate.usn, candidate.email, candidate.year, candidate.phone),
            )
            row = cursor.fetchone()
            cursor.connection.commit()
            return _to_record(row)

    def list_all(self) -> list[ParticipantRecord]:
        sql = f"""
            SELECT {_COLUMNS}
            FROM participants
            ORDER BY registered_at, id
        """

        with self._cursor() as cursor:
            cursor.execute(sql)
            return [_to_record(row) for row in cursor.fetchall()]

    def claim_capacity_notice(self, capacity: int) -> bool:
        """
        Atomically claim the one-time roster export for a capacity value.

        Uses INSERT ... ON CONFLICT DO NOTHING: the primary key on capacity
        guarantees exactly one caller sees rowcount == 1.
        """
        sql = """
            INSERT INTO roster_notices (capacity, notified_at)
            VALUES (%s, NOW())
            ON CONFLICT (capacity) DO NOTHING
        """

        with self._cursor() as cursor:
            cursor.execute(sql, (capacity,))
            cursor.connection.commit()
            return cursor.rowcount == 1

    def release_capacity_notice(self, capacity: int) -> None:
        """Delete the notice row so the claim can be taken again."""
        with self._cursor() as cursor:
            cursor.execute("DELETE FROM roster_notices WHERE capacity = %s", (capacity,))
            cursor.connection.commit()


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning("Migrations directory not found: %s", migrations_dir)
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info("Running %d migration(s)", len(sql_files))

    for sql_file in sql_files:
        logger.info("Executing migration: %s", sql_file.name)
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info("Migration complete: %s", sql_file.name)
        except Exception as e:
            logger.error("Migration failed: %s - %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
