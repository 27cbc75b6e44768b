"""Fluent builder for ticket bookings."""

from typing import Dict

from cinema_manager.models import TicketBooking


class TicketBookingBuilder:
    """
    Collects booking fields step by step.

    Setters return the builder so calls can be chained in any order. Every
    ``build()`` returns a fresh ``TicketBooking`` from the current values;
    fields never set come out as empty strings.

    Values must be strings; anything else is rejected by pydantic with a
    ``ValidationError`` when ``build()`` is called.
    """

    def __init__(self):
        self._fields: Dict[str, str] = {}

    def set_movie_title(self, movie_title: str) -> "TicketBookingBuilder":
        self._fields["movie_title"] = movie_title
        return self

    def set_seat_number(self, seat_number: str) -> "TicketBookingBuilder":
        self._fields["seat_number"] = seat_number
        return self

    def set_snack_combo(self, snack_combo: str) -> "TicketBookingBuilder":
        self._fields["snack_combo"] = snack_combo
        return self

    def build(self) -> TicketBooking:
        return TicketBooking(**self._fields)
