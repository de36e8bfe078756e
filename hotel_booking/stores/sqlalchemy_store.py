"""SQLAlchemy implementations of the admission collaborators."""

import logging
from datetime import date
from typing import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hotel_booking.models.booking import Booking
from hotel_booking.models.hotel import Hotel
from hotel_booking.models.invoice import Invoice
from hotel_booking.models.room import Room
from hotel_booking.models.user import User
from hotel_booking.services.interfaces import (
    BookingStore,
    HotelCatalog,
    RoomCatalog,
    UserDirectory,
)

logger = logging.getLogger(__name__)


class SqlUserDirectory(UserDirectory):
    def __init__(self, db: Session) -> None:
        self._db = db

    def get_user_by_email(self, email: str) -> User | None:
        return self._db.query(User).filter(User.email == email).first()


class SqlHotelCatalog(HotelCatalog):
    def __init__(self, db: Session) -> None:
        self._db = db

    def get_hotel_by_id(self, hotel_id: int) -> Hotel | None:
        return self._db.query(Hotel).filter(Hotel.id == hotel_id).first()


class SqlRoomCatalog(RoomCatalog):
    def __init__(self, db: Session) -> None:
        self._db = db

    def get_rooms_by_ids(self, room_ids: Sequence[int]) -> list[Room]:
        if not room_ids:
            return []
        return self._db.query(Room).filter(Room.id.in_(set(room_ids))).all()


class SqlBookingStore(BookingStore):
    def __init__(self, db: Session) -> None:
        self._db = db

    def find_overlapping_bookings(
        self, hotel_id: int, check_in_date: date, check_out_date: date
    ) -> list[Booking]:
        return (
            self._db.query(Booking)
            .filter(
                Booking.hotel_id == hotel_id,
                Booking.check_in_date < check_out_date,
                Booking.check_out_date > check_in_date,
            )
            .all()
        )

    def save_booking_with_invoice(self, booking: Booking) -> None:
        try:
            self._db.add(booking)
            # the invoice number is derived from the booking id
            self._db.flush()
            self._db.add(Invoice.for_booking(booking))
            self._db.commit()
        except SQLAlchemyError:
            logger.warning("Saving booking with invoice failed, rolling back")
            self._db.rollback()
            raise
        self._db.refresh(booking)
