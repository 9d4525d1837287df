#!/usr/bin/env python3
"""Bring the Q&A schema up to date.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to a given revision
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

from qeta.config import Settings
from qeta.util.logging import setup_logging
from qeta.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(argv: list[str]) -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    revision = argv[0] if argv else "head"
    url = make_url(settings.database_url)

    with logfire.span(
        "run_migrations",
        revision=revision,
        database=url.database,
        host=url.host,
    ):
        try:
            command.upgrade(Config(str(ALEMBIC_INI)), revision)
        except Exception:
            # Fail the deploy rather than serve against a stale schema
            logfire.exception("Schema migration failed", revision=revision)
            raise

    logfire.info("Schema is up to date", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
