"""Exceptions raised by cinema_manager."""

from typing import Iterable


class CinemaError(Exception):
    """Base class for all cinema_manager errors."""


class ScheduleCopyError(CinemaError):
    """A schedule could not be duplicated."""


class IncompleteScheduleError(CinemaError, ValueError):
    """A schedule was rendered before a movie was assigned to it."""


class UnknownVariantError(CinemaError, KeyError):
    """No creator or factory is registered under the requested name."""

    def __init__(self, family: str, name: str, known: Iterable[str]):
        self.family = family
        self.name = name
        self.known = sorted(known)
        super().__init__(f"Unknown {family} '{name}' (expected one of: {', '.join(self.known)})")

    def __str__(self):
        # KeyError would otherwise repr() the message
        return self.args[0]
