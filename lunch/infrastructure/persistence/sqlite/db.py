# lunch/infrastructure/persistence/sqlite/db.py
import logging

import backoff
from sqlalchemy import create_engine, text
from sqlalchemy.exc import OperationalError

logger = logging.getLogger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS places (
    id           TEXT PRIMARY KEY,
    team_id      TEXT NOT NULL,
    name         TEXT NOT NULL,
    last_visited TEXT NOT NULL,
    last_skipped TEXT NOT NULL,
    visit_count  INTEGER NOT NULL DEFAULT 0,
    skip_count   INTEGER NOT NULL DEFAULT 0
);
"""

MIGRATIONS = [
    ("address", "ALTER TABLE places ADD COLUMN address TEXT;"),
    ("version", "ALTER TABLE places ADD COLUMN version INTEGER NOT NULL DEFAULT 0;"),
]

INDEXES = [
    "CREATE UNIQUE INDEX IF NOT EXISTS idx_places_name_team ON places(name, team_id);",
    "CREATE INDEX IF NOT EXISTS idx_places_team ON places(team_id);",
]


def _is_permanent(e: OperationalError) -> bool:
    return "database is locked" not in str(e)


@backoff.on_exception(backoff.expo, OperationalError, max_time=30, giveup=_is_permanent)
def _provision(engine) -> None:
    with engine.begin() as conn:
        conn.execute(text(SCHEMA_SQL))

        cols = {row[1] for row in conn.execute(text("PRAGMA table_info('places');")).all()}
        for col, sql in MIGRATIONS:
            if col not in cols:
                logger.info("Adding column %s to places", col)
                conn.execute(text(sql))

        for sql in INDEXES:
            conn.execute(text(sql))


def make_engine(path: str = "lunch.db"):
    engine = create_engine(f"sqlite:///{path}", future=True)
    try:
        _provision(engine)
    except Exception:
        engine.dispose()
        raise
    return engine
