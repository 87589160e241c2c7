from __future__ import annotations

import random
from datetime import datetime, timedelta
from typing import Sequence

from .entities import Place
from .errors import EmptyCandidatesError

SKIP_COOLDOWN = timedelta(hours=6)
VISIT_COOLDOWN = timedelta(hours=72)


def eligible(places: Sequence[Place], now: datetime) -> list[Place]:
    """Places not skipped within ``SKIP_COOLDOWN`` and not visited within ``VISIT_COOLDOWN``."""
    skip_cutoff = now - SKIP_COOLDOWN
    visit_cutoff = now - VISIT_COOLDOWN
    return [
        p for p in places if p.last_skipped < skip_cutoff and p.last_visited < visit_cutoff
    ]


def select(places: Sequence[Place], rng: random.Random) -> Place:
    """Pick one place uniformly at random.

    TODO: weight places so we prefer ones we haven't visited or skipped recently.
    """
    if not places:
        raise EmptyCandidatesError()
    shuffled = list(places)
    # Fisher-Yates, working down from the end.
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled[0]
