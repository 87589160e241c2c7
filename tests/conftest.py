import random
from datetime import datetime, timedelta, timezone

import pytest

from lunch.app.use_cases.manage_places import ManagePlacesUseCase
from lunch.app.use_cases.propose_place import ProposePlaceUseCase
from lunch.app.use_cases.record_outcome import RecordOutcomeUseCase
from lunch.infrastructure.persistence.sqlite.place_repository import SQLitePlaceRepository

NOON = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class FixedClock:
    def __init__(self, current: datetime = NOON):
        self.current = current

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        self.current += timedelta(**kwargs)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def repo(tmp_path):
    r = SQLitePlaceRepository(str(tmp_path / "lunch.db"))
    yield r
    r.close()


@pytest.fixture
def manage(repo) -> ManagePlacesUseCase:
    return ManagePlacesUseCase(repo)


@pytest.fixture
def propose(repo, clock) -> ProposePlaceUseCase:
    return ProposePlaceUseCase(repo, clock=clock, rng=random.Random(7))


@pytest.fixture
def outcome(repo, clock) -> RecordOutcomeUseCase:
    return RecordOutcomeUseCase(repo, clock=clock)
