"""
Unit tests for TicketBookingBuilder
===================================
"""

import pytest
from pydantic import ValidationError

from cinema_manager.booking import TicketBookingBuilder
from cinema_manager.models import TicketBooking


class TestTicketBookingBuilder:
    def test_setters_return_builder(self):
        builder = TicketBookingBuilder()
        assert builder.set_movie_title("Inception") is builder
        assert builder.set_seat_number("A1") is builder
        assert builder.set_snack_combo("Nachos") is builder

    def test_order_independent(self):
        first = TicketBookingBuilder().set_seat_number("A1").set_movie_title("Inception").build()
        second = TicketBookingBuilder().set_movie_title("Inception").set_seat_number("A1").build()
        assert first == second
        assert first.model_dump() == {"movie_title": "Inception", "seat_number": "A1", "snack_combo": ""}

    def test_empty_builder(self):
        booking = TicketBookingBuilder().build()
        assert booking == TicketBooking()
        assert str(booking) == "Movie: , Seat: , Snacks: "

    def test_text_form(self):
        booking = (
            TicketBookingBuilder()
            .set_movie_title("Inception")
            .set_seat_number("A1")
            .set_snack_combo("Popcorn and Soda")
            .build()
        )
        assert str(booking) == "Movie: Inception, Seat: A1, Snacks: Popcorn and Soda"

    def test_build_returns_independent_snapshots(self):
        builder = TicketBookingBuilder().set_movie_title("Inception")
        first = builder.build()
        second = builder.build()
        assert first == second
        assert first is not second

        builder.set_seat_number("B7")
        third = builder.build()
        assert first.seat_number == ""
        assert third.seat_number == "B7"

    def test_last_value_wins(self):
        booking = TicketBookingBuilder().set_seat_number("A1").set_seat_number("C3").build()
        assert booking.seat_number == "C3"

    def test_booking_is_immutable(self):
        booking = TicketBookingBuilder().set_movie_title("Inception").build()
        with pytest.raises(ValidationError):
            booking.movie_title = "Tenet"

    def test_non_string_value_rejected_on_build(self):
        builder = TicketBookingBuilder().set_seat_number(12)
        with pytest.raises(ValidationError, match="seat_number"):
            builder.build()
