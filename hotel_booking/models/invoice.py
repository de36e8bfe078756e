from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from hotel_booking.db import Base
from hotel_booking.utils.validation_helpers import nights_between


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True, index=True)
    booking_id = Column(Integer, ForeignKey("bookings.id"), unique=True, nullable=False)
    invoice_number = Column(String, unique=True, nullable=False)
    issued_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    nights = Column(Integer, nullable=False)
    room_count = Column(Integer, nullable=False)
    number_of_guests = Column(Integer, nullable=False)
    status = Column(String, nullable=False, default="UNPAID")

    booking = relationship("Booking", back_populates="invoice")

    @classmethod
    def for_booking(cls, booking):
        """Derive the invoice of a booking that already has an id."""
        return cls(
            booking=booking,
            invoice_number=f"INV-{booking.id:06d}",
            issued_at=datetime.utcnow(),
            nights=nights_between(booking.check_in_date, booking.check_out_date),
            room_count=len(booking.booking_rooms),
            number_of_guests=booking.number_of_guests,
            status="UNPAID",
        )
