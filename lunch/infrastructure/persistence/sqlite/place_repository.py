import logging
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from lunch.core.entities import Place
from lunch.core.errors import ConflictError, NotFoundError, StorageError
from lunch.core.ports import PlaceRepository

from .db import make_engine

logger = logging.getLogger(__name__)

COLUMNS = "id,team_id,name,address,last_visited,last_skipped,visit_count,skip_count,version"

SELECT_ALL_SQL = f"SELECT {COLUMNS} FROM places WHERE team_id=:team_id ORDER BY name;"

SELECT_ONE_SQL = f"SELECT {COLUMNS} FROM places WHERE team_id=:team_id AND id=:id;"

INSERT_SQL = f"""
INSERT INTO places ({COLUMNS})
VALUES (:id, :team_id, :name, :address, :last_visited, :last_skipped, :visit_count, :skip_count, :version);
"""

# Compare-and-swap on version so concurrent visit/skip calls can't silently drop a write.
REPLACE_SQL = """
UPDATE places
SET name = :name,
    address = :address,
    last_visited = :last_visited,
    last_skipped = :last_skipped,
    visit_count = :visit_count,
    skip_count = :skip_count,
    version = :version + 1
WHERE id = :id AND team_id = :team_id AND version = :version;
"""

EXISTS_SQL = "SELECT 1 FROM places WHERE team_id=:team_id AND id=:id;"

DELETE_SQL = "DELETE FROM places WHERE team_id=:team_id AND id=:id;"


class SQLitePlaceRepository(PlaceRepository):
    def __init__(self, path: str = "lunch.db"):
        with self._storage_errors(f"open database {path}"):
            self.engine = make_engine(path)

    @staticmethod
    def _to_row(place: Place) -> dict:
        return {
            "id": place.id,
            "team_id": place.team_id,
            "name": place.name,
            "address": place.address,
            "last_visited": place.last_visited.isoformat(),
            "last_skipped": place.last_skipped.isoformat(),
            "visit_count": place.visit_count,
            "skip_count": place.skip_count,
            "version": place.version,
        }

    @staticmethod
    def _from_row(row) -> Place:
        d = dict(row._mapping)
        d["last_visited"] = datetime.fromisoformat(d["last_visited"])
        d["last_skipped"] = datetime.fromisoformat(d["last_skipped"])
        return Place(**d)

    @contextmanager
    def _storage_errors(self, action: str):
        try:
            yield
        except IntegrityError as e:
            logger.info("Rejected %s: %s", action, e.orig)
            raise ConflictError() from e
        except SQLAlchemyError as e:
            logger.exception("Failed to %s", action)
            raise StorageError() from e

    def find_all(self, team_id: str) -> list[Place]:
        with self._storage_errors("get all places"), self.engine.begin() as conn:
            rows = conn.execute(text(SELECT_ALL_SQL), {"team_id": team_id}).all()
        return [self._from_row(r) for r in rows]

    def find_one(self, team_id: str, place_id: str) -> Place | None:
        with self._storage_errors(f"find place {place_id}"), self.engine.begin() as conn:
            row = conn.execute(
                text(SELECT_ONE_SQL), {"team_id": team_id, "id": place_id}
            ).one_or_none()
        if not row:
            return None
        return self._from_row(row)

    def insert(self, place: Place) -> None:
        with self._storage_errors("insert place"), self.engine.begin() as conn:
            conn.execute(text(INSERT_SQL), self._to_row(place))

    def replace(self, place: Place) -> Place:
        with self._storage_errors(f"update place {place.id}"), self.engine.begin() as conn:
            result = conn.execute(text(REPLACE_SQL), self._to_row(place))
            if result.rowcount == 0:
                exists = conn.execute(
                    text(EXISTS_SQL), {"team_id": place.team_id, "id": place.id}
                ).one_or_none()
                if exists:
                    raise ConflictError("Place was modified concurrently")
                raise NotFoundError()
        return replace(place, version=place.version + 1)

    def delete(self, team_id: str, place_id: str) -> None:
        with self._storage_errors(f"delete place {place_id}"), self.engine.begin() as conn:
            result = conn.execute(text(DELETE_SQL), {"team_id": team_id, "id": place_id})
            if result.rowcount == 0:
                raise NotFoundError()

    def close(self):
        self.engine.dispose()
