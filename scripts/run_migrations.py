#!/usr/bin/env python3
"""Run database migrations with Logfire error tracking."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from campus.config import Settings
from campus.util.logging import setup_logging
from campus.util.observability import configure_logfire


def main() -> int:
    """Upgrade the schema to head, logging failures to Logfire."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Starting database migrations", environment=settings.environment)
        command.upgrade(Config("alembic.ini"), "head")
        logfire.info("Database migrations completed")
        return 0
    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # The container must not start against a half-migrated schema
        raise


if __name__ == "__main__":
    sys.exit(main())
