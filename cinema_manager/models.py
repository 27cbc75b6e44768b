"""Data models for cinema content and ticket bookings."""

from pydantic import BaseModel, ConfigDict


class ContentItem(BaseModel):
    """A movie as offered by the cinema, tagged with its presentation kind."""

    model_config = ConfigDict(frozen=True)

    title: str
    kind: str  # Standard, PremiumFormat

    def get_title(self) -> str:
        return self.title

    def get_kind(self) -> str:
        return self.kind


class TicketBooking(BaseModel):
    """Single ticket booking. Unset fields are empty strings."""

    model_config = ConfigDict(frozen=True)

    movie_title: str = ""
    seat_number: str = ""
    snack_combo: str = ""

    def __str__(self) -> str:
        return f"Movie: {self.movie_title}, Seat: {self.seat_number}, Snacks: {self.snack_combo}"
