import logging
import threading
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from hotel_booking.db import get_db
from hotel_booking.models.booking import Booking
from hotel_booking.schemas.booking import BookingCreatedResponse, BookingRequest, BookingResponse
from hotel_booking.services.admission import AdmissionEngine
from hotel_booking.services.errors import BookingRejected
from hotel_booking.stores.sqlalchemy_store import (
    SqlBookingStore,
    SqlHotelCatalog,
    SqlRoomCatalog,
    SqlUserDirectory,
)
from hotel_booking.utils.auth import get_current_identity

logger = logging.getLogger(__name__)

# Serializes capacity check and insert across worker threads of this process.
ADMISSION_LOCK = threading.Lock()

router = APIRouter(
    prefix="/bookings",
    tags=["bookings"],
)


def get_admission_engine(db: Session = Depends(get_db)) -> AdmissionEngine:
    return AdmissionEngine(
        users=SqlUserDirectory(db),
        hotels=SqlHotelCatalog(db),
        rooms=SqlRoomCatalog(db),
        bookings=SqlBookingStore(db),
        lock=ADMISSION_LOCK,
    )


@router.post(
    "/add",
    response_model=BookingCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new booking",
    description="Reserve units of one or more room types for a stay. Requires authentication.",
)
def add_booking(
    booking: BookingRequest,
    engine: AdmissionEngine = Depends(get_admission_engine),
    identity: str = Depends(get_current_identity),
):
    """
    Reserve rooms in a hotel for a stay and issue the invoice.
    Requires authentication.

    - **hotel_id**: ID of the hotel.
    - **room_ids**: room type IDs, one entry per unit (repeat an ID to reserve several units).
    - **check_in_date**: arrival day.
    - **check_out_date**: departure day, must be after check-in.
    - **number_of_guests**: number of guests.
    - **status**: booking status label, "PENDING" by default.
    """
    logger.debug(f"Creating booking for user: {identity}, hotel_id: {booking.hotel_id}, room_ids: {booking.room_ids}")
    try:
        db_booking = engine.admit(identity, booking)
    except BookingRejected as rejection:
        logger.info(f"Booking rejected for user: {identity}: {rejection}")
        status_code = status.HTTP_404_NOT_FOUND if rejection.is_not_found else status.HTTP_400_BAD_REQUEST
        raise HTTPException(status_code=status_code, detail=rejection.message)

    return BookingCreatedResponse(
        message="Booking created successfully with invoice.",
        booking_id=db_booking.id,
        invoice_id=db_booking.invoice.id,
    )


@router.get(
    "/",
    response_model=List[BookingResponse],
    summary="List my bookings",
)
def get_bookings(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    identity: str = Depends(get_current_identity),
):
    """
    Retrieve the authenticated user's bookings.
    """
    bookings = (
        db.query(Booking)
        .filter(Booking.user.has(email=identity))
        .order_by(Booking.id)
        .offset(skip)
        .limit(limit)
        .all()
    )
    logger.debug(f"Retrieved {len(bookings)} bookings for {identity}")
    return bookings


@router.get(
    "/{booking_id}",
    response_model=BookingResponse,
    summary="Get a booking by ID",
)
def get_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    identity: str = Depends(get_current_identity),
):
    """
    Retrieve one of the authenticated user's bookings, with its invoice.
    """
    booking = (
        db.query(Booking)
        .filter(Booking.id == booking_id, Booking.user.has(email=identity))
        .first()
    )
    if not booking:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found.")
    return booking
