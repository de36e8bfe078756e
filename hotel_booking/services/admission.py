"""Booking admission: decide whether a booking request may be committed.

The engine depends only on the collaborator interfaces and runs a fixed
pipeline, stopping at the first rejection:

- user, hotel and room resolution
- date range (check-out strictly after check-in)
- per room type capacity against overlapping bookings
- persistence of the booking together with its invoice

Capacity check and persistence run under one lock so that two admissions in
the same process cannot both pass the check before either commits.
"""

import logging
from collections import Counter
from contextlib import AbstractContextManager, nullcontext
from typing import Iterable

from hotel_booking.models.booking import Booking, BookingRoom
from hotel_booking.schemas.booking import BookingRequest
from hotel_booking.services.errors import (
    HotelNotFoundError,
    InsufficientRoomsError,
    InvalidDateRangeError,
    RoomNotFoundError,
    UserNotFoundError,
)
from hotel_booking.services.interfaces import (
    BookingStore,
    HotelCatalog,
    RoomCatalog,
    UserDirectory,
)

logger = logging.getLogger(__name__)


def count_committed_units(bookings: Iterable[Booking], room_id: int) -> int:
    """Units of a room type already held by the given bookings."""
    return sum(booking.room_ids.count(room_id) for booking in bookings)


class AdmissionEngine:
    def __init__(
        self,
        users: UserDirectory,
        hotels: HotelCatalog,
        rooms: RoomCatalog,
        bookings: BookingStore,
        lock: AbstractContextManager | None = None,
    ) -> None:
        self._users = users
        self._hotels = hotels
        self._rooms = rooms
        self._bookings = bookings
        self._lock = lock

    def admit(self, requester_email: str | None, request: BookingRequest) -> Booking:
        """Admit a booking request and return the persisted booking.

        Raises:
            UserNotFoundError: If no user has the requester's email.
            HotelNotFoundError: If the hotel does not exist.
            RoomNotFoundError: For the first requested room id that does not exist.
            InvalidDateRangeError: If check-out is not after check-in.
            InsufficientRoomsError: If any room type lacks units for the stay.
        """
        user = self._users.get_user_by_email(requester_email) if requester_email else None
        if user is None:
            raise UserNotFoundError(requester_email)

        hotel = self._hotels.get_hotel_by_id(request.hotel_id)
        if hotel is None:
            raise HotelNotFoundError(request.hotel_id)

        requested = Counter(request.room_ids)
        rooms_by_id = {
            room.id: room for room in self._rooms.get_rooms_by_ids(list(requested))
        }
        for room_id in request.room_ids:
            if room_id not in rooms_by_id:
                raise RoomNotFoundError(room_id)

        if request.check_out_date <= request.check_in_date:
            raise InvalidDateRangeError()

        with self._lock if self._lock is not None else nullcontext():
            overlapping = self._bookings.find_overlapping_bookings(
                request.hotel_id, request.check_in_date, request.check_out_date
            )
            shortages = {}
            for room_id, count in requested.items():
                room = rooms_by_id[room_id]
                committed = count_committed_units(overlapping, room_id)
                if committed + count > room.quantity:
                    shortages[room_id] = (count, max(room.quantity - committed, 0))
            if shortages:
                raise InsufficientRoomsError(shortages)

            booking = Booking(
                user=user,
                hotel=hotel,
                check_in_date=request.check_in_date,
                check_out_date=request.check_out_date,
                number_of_guests=request.number_of_guests,
                status=request.status,
                booking_rooms=[
                    BookingRoom(room=rooms_by_id[room_id], room_id=room_id)
                    for room_id in request.room_ids
                ],
            )
            self._bookings.save_booking_with_invoice(booking)

        logger.info(
            "Admitted booking %s for %s at hotel %s (%d units)",
            booking.id,
            requester_email,
            request.hotel_id,
            len(request.room_ids),
        )
        return booking
