"""Repository adapters - Database implementations."""

from .postgres import PostgresParticipantRepository, run_migrations

__all__ = ["PostgresParticipantRepository", "run_migrations"]
