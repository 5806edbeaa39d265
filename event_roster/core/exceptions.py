"""
Error taxonomy for the roster service.

Services raise these; the routes translate them into HTTP responses.
"""


class RosterError(Exception):
    """Base exception for all roster service errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidInputError(RosterError):
    """A required field is missing or empty."""


class EventNotFoundError(RosterError):
    def __init__(self, event_id: int):
        self.event_id = event_id
        super().__init__("Event not found")


class ForbiddenError(RosterError):
    """Supplied password does not match the event's password."""

    def __init__(self, message: str = "Invalid password"):
        super().__init__(message)


class StorageFailureError(RosterError):
    """The database or the lock server failed. Callers may retry."""
