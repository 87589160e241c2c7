from __future__ import annotations

import logging

from lunch.core.entities import Place
from lunch.core.errors import NotFoundError
from lunch.core.ports import Clock, PlaceRepository, SystemClock

logger = logging.getLogger(__name__)


class RecordOutcomeUseCase:
    """Records what a team did with a proposal: went there (visit) or not (skip)."""

    def __init__(self, repo: PlaceRepository, *, clock: Clock | None = None):
        self.repo = repo
        self.clock = clock or SystemClock()

    def _get(self, team_id: str, place_id: str) -> Place:
        place = self.repo.find_one(team_id, place_id)
        if place is None:
            raise NotFoundError()
        return place

    def visit(self, team_id: str, place_id: str) -> Place:
        place = self._get(team_id, place_id).visited(self.clock.now())
        stored = self.repo.replace(place)
        logger.info("Visited %s (%d visits) in %s", stored.name, stored.visit_count, team_id)
        return stored

    def skip(self, team_id: str, place_id: str) -> None:
        place = self._get(team_id, place_id).skipped(self.clock.now())
        self.repo.replace(place)
        logger.info("Skipped %s (%d skips) in %s", place.name, place.skip_count, team_id)
