"""In-memory collaborators for exercising the admission engine without a database."""

from itertools import count

from hotel_booking.models.invoice import Invoice
from hotel_booking.services.interfaces import (
    BookingStore,
    HotelCatalog,
    RoomCatalog,
    UserDirectory,
)


class InMemoryUsers(UserDirectory):
    def __init__(self, *users):
        self.users = {user.email: user for user in users}
        self.calls = 0

    def get_user_by_email(self, email):
        self.calls += 1
        return self.users.get(email)


class InMemoryHotels(HotelCatalog):
    def __init__(self, *hotels):
        self.hotels = {hotel.id: hotel for hotel in hotels}

    def get_hotel_by_id(self, hotel_id):
        return self.hotels.get(hotel_id)


class InMemoryRooms(RoomCatalog):
    def __init__(self, *rooms):
        self.rooms = {room.id: room for room in rooms}
        self.requested_ids = []

    def get_rooms_by_ids(self, room_ids):
        self.requested_ids.append(list(room_ids))
        return [self.rooms[room_id] for room_id in room_ids if room_id in self.rooms]


class InMemoryBookings(BookingStore):
    def __init__(self, *bookings, fail_on_save=None):
        self.bookings = list(bookings)
        self.saved = []
        self.overlap_queries = []
        self.fail_on_save = fail_on_save
        self._ids = count(1000)

    def find_overlapping_bookings(self, hotel_id, check_in_date, check_out_date):
        self.overlap_queries.append((hotel_id, check_in_date, check_out_date))
        return [
            booking
            for booking in self.bookings
            if booking.hotel.id == hotel_id
            # half-open stays: a check-out on another stay's check-in day does not clash
            and booking.check_in_date < check_out_date
            and check_in_date < booking.check_out_date
        ]

    def save_booking_with_invoice(self, booking):
        if self.fail_on_save is not None:
            raise self.fail_on_save
        booking.id = next(self._ids)
        invoice = Invoice.for_booking(booking)
        invoice.id = booking.id
        self.bookings.append(booking)
        self.saved.append(booking)
