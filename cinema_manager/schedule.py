"""
Movie schedules and template duplication.

A schedule starts out as a template. ``duplicate()`` turns it (or any
schedule derived from it) into a new derived schedule:

- ``movie`` is shared with the source, never copied
- ``time`` is copied, so later changes stay local
- the copy is always ``DERIVED``; the role cannot be set any other way
"""

import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel, PrivateAttr

from cinema_manager.errors import IncompleteScheduleError, ScheduleCopyError
from cinema_manager.models import ContentItem

logger = logging.getLogger(__name__)


class ScheduleRole(str, Enum):
    TEMPLATE = "template"
    DERIVED = "derived"


class MovieSchedule(BaseModel):
    """A movie showing at a given time."""

    movie: ContentItem | None = None
    time: str = ""
    # only duplicate_schedule moves a schedule to DERIVED
    _role: ScheduleRole = PrivateAttr(default=ScheduleRole.TEMPLATE)

    def set_movie(self, movie: ContentItem) -> None:
        self.movie = movie

    def set_time(self, time: str) -> None:
        self.time = time

    @property
    def role(self) -> ScheduleRole:
        return self._role

    @property
    def is_template(self) -> bool:
        return self.role is ScheduleRole.TEMPLATE

    def duplicate(self) -> "MovieSchedule":
        return duplicate_schedule(self)

    def __str__(self) -> str:
        if self.movie is None:
            raise IncompleteScheduleError(f"Schedule at '{self.time}' has no movie assigned")
        return f"Movie: {self.movie.title}, Time: {self.time}"


def duplicate_schedule(schedule: MovieSchedule) -> MovieSchedule:
    """
    Shallow-copy a schedule into a new derived schedule.

    Raises:
        ScheduleCopyError: if the copy could not be made
    """
    try:
        derived: Optional[MovieSchedule] = schedule.model_copy()
    except Exception as e:
        raise ScheduleCopyError(f"Could not duplicate schedule at '{schedule.time}': {e}") from e

    if derived is None or derived is schedule:
        raise ScheduleCopyError(f"Copy of schedule at '{schedule.time}' is not a new schedule")

    derived._role = ScheduleRole.DERIVED
    logger.debug(f"Derived schedule from {schedule.role.value} at {schedule.time}")
    return derived
