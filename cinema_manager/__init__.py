"""In-memory construction of cinema domain objects."""

from cinema_manager.booking import TicketBookingBuilder
from cinema_manager.config import CinemaConfig, get_config, init_config
from cinema_manager.errors import CinemaError, IncompleteScheduleError, ScheduleCopyError, UnknownVariantError
from cinema_manager.models import ContentItem, TicketBooking
from cinema_manager.schedule import MovieSchedule, ScheduleRole, duplicate_schedule

__version__ = "0.1.0"

__all__ = [
    'CinemaConfig',
    'get_config',
    'init_config',
    'ContentItem',
    'TicketBooking',
    'TicketBookingBuilder',
    'MovieSchedule',
    'ScheduleRole',
    'duplicate_schedule',
    'CinemaError',
    'IncompleteScheduleError',
    'ScheduleCopyError',
    'UnknownVariantError',
]
