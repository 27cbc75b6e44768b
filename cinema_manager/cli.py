#!/usr/bin/env python3
"""
Cinema Manager demo
===================

Wires the configuration, content creators, widget factories, booking
builder and schedule templates together and prints the results.

Usage:
    cinema-manager
    cinema-manager --kind PremiumFormat --theme light --derived-time 19:30 22:00
    python -m cinema_manager --cinema-name "Kino Luna" --screens 3
"""

import argparse
import logging
import sys
from typing import List, Optional

from cinema_manager.booking import TicketBookingBuilder
from cinema_manager.config import init_config
from cinema_manager.errors import CinemaError
from cinema_manager.factories import CONTENT_CREATORS, UI_FACTORIES, get_content_creator, get_ui_factory
from cinema_manager.listing import bookings_to_frame, schedules_to_frame
from cinema_manager.schedule import MovieSchedule

logger = logging.getLogger(__name__)

# Defaults
DEFAULT_CINEMA_NAME = "Starlight Cinemas"
DEFAULT_SCREENS = 5
DEFAULT_MOVIE = "Inception"
DEFAULT_SEAT = "A1"
DEFAULT_SNACKS = "Popcorn and Soda"
DEFAULT_TIME = "18:00"
DEFAULT_DERIVED_TIMES = ["21:00"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Cinema management demo')
    parser.add_argument('--cinema-name', default=DEFAULT_CINEMA_NAME, help='Cinema name')
    parser.add_argument('--screens', type=int, default=DEFAULT_SCREENS, help='Number of screens')
    parser.add_argument('--movie', default=DEFAULT_MOVIE, help='Movie title')
    parser.add_argument('--kind', choices=sorted(CONTENT_CREATORS), default='Standard', help='Content kind')
    parser.add_argument('--theme', choices=sorted(UI_FACTORIES), default='dark', help='UI theme')
    parser.add_argument('--seat', default=DEFAULT_SEAT, help='Seat number for the booking')
    parser.add_argument('--snacks', default=DEFAULT_SNACKS, help='Snack combo for the booking')
    parser.add_argument('--time', default=DEFAULT_TIME, help='Showtime of the template schedule')
    parser.add_argument('--derived-time', nargs='+', action='extend',
                        help='Showtimes to derive from the template (repeatable)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser


def run(args: argparse.Namespace) -> None:
    config = init_config(name=args.cinema_name, screen_count=args.screens)
    print(f"Cinema: {config.get_name()}, Screens: {config.get_screen_count()}")

    movie = get_content_creator(args.kind).create_item(args.movie)
    print(f"Movie: {movie.get_title()}, Type: {movie.get_kind()}")

    button = get_ui_factory(args.theme).create_button()
    button.render()

    booking = (
        TicketBookingBuilder()
        .set_movie_title(args.movie)
        .set_seat_number(args.seat)
        .set_snack_combo(args.snacks)
        .build()
    )
    print(booking)

    template = MovieSchedule()
    template.set_time(args.time)
    template.set_movie(movie)

    schedules = [template]
    for showtime in args.derived_time or DEFAULT_DERIVED_TIMES:
        derived = template.duplicate()
        derived.set_time(showtime)
        print(derived)
        schedules.append(derived)

    print()
    print(schedules_to_frame(schedules).to_string(index=False))

    print()
    print(bookings_to_frame([booking]).to_string(index=False))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s | %(levelname)-8s | %(message)s',
        datefmt='%H:%M:%S'
    )

    try:
        run(args)
    except CinemaError as e:
        logger.error(f"{e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
