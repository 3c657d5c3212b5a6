#!/usr/bin/env python3
"""Apply the user schema migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3f1c2a9d7b04
"""

import sys
import logfire
from alembic import command
from alembic.config import Config

from passage.config import Settings
from passage.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    """Upgrade the database to the requested revision."""
    settings = Settings()
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"

    try:
        with logfire.span("run_migrations", target=target):
            command.upgrade(Config("alembic.ini"), target)
        logfire.info("Database migrations applied", target=target)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            target=target,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the deploy stops before the app starts on a stale schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv))
