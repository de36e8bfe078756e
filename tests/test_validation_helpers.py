from datetime import date

from hotel_booking.utils.validation_helpers import nights_between


def test_nights_between():
    assert nights_between(date(2025, 4, 5), date(2025, 4, 9)) == 4
    assert nights_between(date(2025, 2, 28), date(2025, 3, 1)) == 1
