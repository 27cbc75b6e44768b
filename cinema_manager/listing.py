"""Tabular views of schedules and bookings."""

from typing import Iterable, List

import pandas as pd

from cinema_manager.errors import IncompleteScheduleError
from cinema_manager.models import TicketBooking
from cinema_manager.schedule import MovieSchedule

SCHEDULE_COLUMNS = ['movie_title', 'kind', 'time', 'role']
BOOKING_COLUMNS = ['movie_title', 'seat_number', 'snack_combo']


def schedules_to_frame(schedules: Iterable[MovieSchedule]) -> pd.DataFrame:
    """One row per showing. Every schedule must have a movie."""
    rows: List[dict] = []
    for schedule in schedules:
        if schedule.movie is None:
            raise IncompleteScheduleError(f"Schedule at '{schedule.time}' has no movie assigned")
        rows.append({
            'movie_title': schedule.movie.title,
            'kind': schedule.movie.kind,
            'time': schedule.time,
            'role': schedule.role.value,
        })
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


def bookings_to_frame(bookings: Iterable[TicketBooking]) -> pd.DataFrame:
    return pd.DataFrame([b.model_dump() for b in bookings], columns=BOOKING_COLUMNS)
