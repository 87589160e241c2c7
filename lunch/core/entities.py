from dataclasses import dataclass, replace
from datetime import datetime, timezone

# Zero instant used for "never visited" / "never skipped".
NEVER = datetime(1, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class Place:
    id: str
    team_id: str
    name: str
    address: str | None = None
    last_visited: datetime = NEVER
    last_skipped: datetime = NEVER
    visit_count: int = 0
    skip_count: int = 0
    version: int = 0

    def visited(self, when: datetime) -> "Place":
        return replace(self, last_visited=when, visit_count=self.visit_count + 1)

    def skipped(self, when: datetime) -> "Place":
        return replace(self, last_skipped=when, skip_count=self.skip_count + 1)


@dataclass(frozen=True)
class PlaceUpdate:
    """Fields a caller may change on an existing place.

    ``None`` leaves a field as is. ``clear_address`` removes the address and
    wins over ``address``.
    """

    name: str | None = None
    address: str | None = None
    clear_address: bool = False

    @property
    def is_empty(self) -> bool:
        return self.name is None and self.address is None and not self.clear_address

    def apply(self, place: Place) -> Place:
        changes = {}
        if self.name is not None:
            changes["name"] = self.name
        if self.clear_address:
            changes["address"] = None
        elif self.address is not None:
            changes["address"] = self.address
        return replace(place, **changes)
