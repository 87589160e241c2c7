from __future__ import annotations

import dataclasses
import logging
import uuid

from lunch.core.entities import Place, PlaceUpdate
from lunch.core.errors import NotFoundError, ValidationError
from lunch.core.ports import PlaceRepository

logger = logging.getLogger(__name__)


def _clean_name(name: str) -> str:
    name = name.strip()
    if not name:
        raise ValidationError("A place needs a name")
    return name


class ManagePlacesUseCase:
    def __init__(self, repo: PlaceRepository):
        self.repo = repo

    def add(self, team_id: str, name: str, address: str | None = None) -> Place:
        place = Place(id=uuid.uuid4().hex, team_id=team_id, name=_clean_name(name), address=address)
        logger.info("Adding %s in %s", place.name, team_id)
        self.repo.insert(place)
        return place

    def find_by_id(self, team_id: str, place_id: str) -> Place:
        place = self.repo.find_one(team_id, place_id)
        if place is None:
            raise NotFoundError()
        return place

    def all_places(self, team_id: str) -> list[Place]:
        return self.repo.find_all(team_id)

    def update(self, team_id: str, place_id: str, changes: PlaceUpdate) -> Place:
        if changes.is_empty:
            raise ValidationError("Nothing to update")
        if changes.name is not None:
            changes = dataclasses.replace(changes, name=_clean_name(changes.name))
        place = changes.apply(self.find_by_id(team_id, place_id))
        return self.repo.replace(place)

    def delete(self, team_id: str, place_id: str) -> None:
        logger.info("Deleting %s from %s", place_id, team_id)
        self.repo.delete(team_id, place_id)
