from datetime import datetime

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from hotel_booking.db import Base


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    hotel_id = Column(Integer, ForeignKey("hotels.id"), nullable=False, index=True)
    check_in_date = Column(Date, nullable=False)
    check_out_date = Column(Date, nullable=False)
    number_of_guests = Column(Integer, nullable=False, default=1)
    status = Column(String, nullable=False, default="PENDING")
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    user = relationship("User", back_populates="bookings")
    hotel = relationship("Hotel", back_populates="bookings")
    booking_rooms = relationship(
        "BookingRoom",
        back_populates="booking",
        cascade="all, delete-orphan",
        order_by="BookingRoom.id",
    )
    invoice = relationship(
        "Invoice", back_populates="booking", uselist=False, cascade="all, delete-orphan"
    )

    @property
    def rooms(self):
        """Reserved room types, one entry per unit."""
        return [booking_room.room for booking_room in self.booking_rooms]

    @property
    def room_ids(self):
        return [booking_room.room_id for booking_room in self.booking_rooms]


class BookingRoom(Base):
    """One reserved unit of a room type; a booking may hold several rows for one room."""

    __tablename__ = "booking_rooms"

    id = Column(Integer, primary_key=True, index=True)
    booking_id = Column(Integer, ForeignKey("bookings.id"), nullable=False, index=True)
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=False, index=True)

    booking = relationship("Booking", back_populates="booking_rooms")
    room = relationship("Room")
