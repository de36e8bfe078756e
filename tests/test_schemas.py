import importlib
import warnings
from datetime import date, datetime

from hotel_booking.models.booking import Booking, BookingRoom
from hotel_booking.models.invoice import Invoice
from hotel_booking.models import hotel as hotel_models, room as room_models, user as user_models  # noqa: F401
from hotel_booking.schemas import auth, booking as booking_schemas, hotel, room
from hotel_booking.schemas.booking import BookingResponse


def test_booking_response_reads_orm_attributes():
    booking = Booking(
        id=3,
        user_id=1,
        hotel_id=6,
        check_in_date=date(2025, 4, 5),
        check_out_date=date(2025, 4, 9),
        number_of_guests=2,
        status="PENDING",
        booking_rooms=[BookingRoom(room_id=10), BookingRoom(room_id=10)],
    )
    Invoice(
        id=7,
        booking=booking,
        invoice_number="INV-000003",
        issued_at=datetime(2025, 4, 1, 12, 0),
        nights=4,
        room_count=2,
        number_of_guests=2,
        status="UNPAID",
    )

    response = BookingResponse.model_validate(booking)

    assert response.room_ids == [10, 10]
    assert response.invoice.invoice_number == "INV-000003"


def test_schemas_define_without_deprecation_warnings():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        for module in (auth, booking_schemas, hotel, room):
            importlib.reload(module)
