from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from hotel_booking.db import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    full_name = Column(String, nullable=True)

    bookings = relationship("Booking", back_populates="user")
