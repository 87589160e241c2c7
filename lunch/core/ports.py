from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Protocol

from .entities import Place


class PlaceRepository(ABC):
    """Team-scoped storage of places.

    Implementations raise ``ConflictError`` on a ``(name, team_id)`` collision,
    ``NotFoundError`` when a scoped record is missing and ``StorageError`` for
    anything else.
    """

    @abstractmethod
    def find_all(self, team_id: str) -> list[Place]: ...
    @abstractmethod
    def find_one(self, team_id: str, place_id: str) -> Place | None: ...
    @abstractmethod
    def insert(self, place: Place) -> None: ...
    @abstractmethod
    def replace(self, place: Place) -> Place: ...
    @abstractmethod
    def delete(self, team_id: str, place_id: str) -> None: ...
    @abstractmethod
    def close(self) -> None: ...


class Clock(Protocol):
    def now(self) -> datetime: ...


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)
