from __future__ import annotations

import logging
import random

from lunch.core.entities import Place
from lunch.core.errors import EmptyCandidatesError
from lunch.core.ports import Clock, PlaceRepository, SystemClock
from lunch.core.selection import eligible, select

logger = logging.getLogger(__name__)


class ProposePlaceUseCase:
    """Suggests where a team should go for lunch today. Read-only."""

    def __init__(
        self,
        repo: PlaceRepository,
        *,
        clock: Clock | None = None,
        rng: random.Random | None = None,
    ):
        self.repo = repo
        self.clock = clock or SystemClock()
        self.rng = rng or random.Random()

    def run(self, team_id: str) -> Place:
        candidates = eligible(self.repo.find_all(team_id), self.clock.now())
        if not candidates:
            logger.warning("We have nowhere to go for team %s", team_id)
            raise EmptyCandidatesError()

        logger.info("We have %d places for team %s", len(candidates), team_id)
        return select(candidates, self.rng)
