"""Collaborator interfaces consumed by the admission engine.

Implementations must be swappable; the engine never talks to the database
directly.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Sequence

from hotel_booking.models.booking import Booking
from hotel_booking.models.hotel import Hotel
from hotel_booking.models.room import Room
from hotel_booking.models.user import User


class UserDirectory(ABC):
    @abstractmethod
    def get_user_by_email(self, email: str) -> User | None:
        """Return the user with this email, or None."""
        ...


class HotelCatalog(ABC):
    @abstractmethod
    def get_hotel_by_id(self, hotel_id: int) -> Hotel | None:
        """Return a hotel by ID, or None if not found."""
        ...


class RoomCatalog(ABC):
    @abstractmethod
    def get_rooms_by_ids(self, room_ids: Sequence[int]) -> list[Room]:
        """Return the rooms that exist among `room_ids`; missing ids are skipped."""
        ...


class BookingStore(ABC):
    @abstractmethod
    def find_overlapping_bookings(
        self, hotel_id: int, check_in_date: date, check_out_date: date
    ) -> list[Booking]:
        """Return the hotel's bookings whose [check_in, check_out) intersects the given range."""
        ...

    @abstractmethod
    def save_booking_with_invoice(self, booking: Booking) -> None:
        """Persist the booking and its generated invoice in one transaction."""
        ...
