"""
Programmatic Alembic helpers.

Schema versions:

* ``INITIAL_REVISION`` (version 1): ``crime`` table with id, position,
  title, date and is_solved.
* ``SUSPECT_REVISION`` (version 2): adds ``suspect TEXT NOT NULL DEFAULT ''``.

The helpers run against an existing engine by handing Alembic an open
connection, so in-memory databases are migrated in place.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"

INITIAL_REVISION = "3b1f9c2d7a10"
SUSPECT_REVISION = "8e4d2a6c5b21"
HEAD_REVISION = SUSPECT_REVISION


def alembic_config(url: Optional[str] = None) -> Config:
    """Build an Alembic config pointing at the packaged migration scripts."""
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    if url:
        # Alembic's configparser treats '%' as interpolation syntax.
        cfg.set_main_option("sqlalchemy.url", url.replace("%", "%%"))
    return cfg


def current_revision(engine: Engine) -> Optional[str]:
    """Return the revision stamped in the database, or None if unversioned."""
    with engine.connect() as connection:
        return MigrationContext.configure(connection).get_current_revision()


def upgrade_database(engine: Engine, revision: str = "head") -> None:
    """Upgrade the schema to ``revision``; a no-op when already there."""
    before = current_revision(engine)
    cfg = alembic_config()
    with engine.begin() as connection:
        cfg.attributes["connection"] = connection
        command.upgrade(cfg, revision)
    after = current_revision(engine)
    if before != after:
        logger.info("crime store migrated: %s -> %s", before or "base", after)


def downgrade_database(engine: Engine, revision: str) -> None:
    """Downgrade the schema to ``revision`` (``"base"`` drops everything)."""
    cfg = alembic_config()
    with engine.begin() as connection:
        cfg.attributes["connection"] = connection
        command.downgrade(cfg, revision)
    logger.info("crime store downgraded to %s", revision)
