class PlaceError(Exception):
    """Base class for errors surfaced to callers. ``str(err)`` is safe to show users."""

    message = "Place error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class NotFoundError(PlaceError):
    # Also raised for places owned by another team.
    message = "Place not found"


class ConflictError(PlaceError):
    message = "A place with this name already exists"


class EmptyCandidatesError(PlaceError):
    message = "There are no places that haven't been skipped or visited recently"


class StorageError(PlaceError):
    message = "Database error"


class ValidationError(PlaceError):
    message = "Invalid place"
