from datetime import date
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from hotel_booking.db import get_db
from hotel_booking.models.booking import BookingRoom
from hotel_booking.models.room import Room
from hotel_booking.routers.hotels import get_hotel_or_404
from hotel_booking.schemas.room import RoomAvailability, RoomCreate, RoomUpdate, RoomResponse
from hotel_booking.services.admission import count_committed_units
from hotel_booking.services.errors import InvalidDateRangeError
from hotel_booking.stores.sqlalchemy_store import SqlBookingStore
from hotel_booking.utils.auth import get_current_identity


router = APIRouter(
    prefix="/rooms",
    tags=["rooms"],
)


def get_room_or_404(room_id: int, db: Session) -> Room:
    room = db.query(Room).filter(Room.id == room_id).first()
    if not room:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Room with ID {room_id} not found.")
    return room


@router.post("/", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
def create_room(room: RoomCreate, db: Session = Depends(get_db), identity: str = Depends(get_current_identity)):
    """
    Create a new room type in an existing hotel.
    Requires authentication.
    """
    get_hotel_or_404(room.hotel_id, db)
    db_room = Room(**room.model_dump())
    db.add(db_room)
    db.commit()
    db.refresh(db_room)
    return db_room


@router.get("/", response_model=List[RoomResponse])
def get_rooms(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    """
    Retrieve a list of all room types.
    """
    rooms = db.query(Room).offset(skip).limit(limit).all()
    return rooms


@router.get("/{room_id}", response_model=RoomResponse)
def get_room(room_id: int, db: Session = Depends(get_db)):
    """
    Retrieve a specific room type by ID.
    """
    return get_room_or_404(room_id, db)


@router.put("/{room_id}", response_model=RoomResponse)
def update_room(room_id: int, room_update: RoomUpdate, db: Session = Depends(get_db), identity: str = Depends(get_current_identity)):
    """
    Update a room type's details.
    Requires authentication.
    """
    db_room = get_room_or_404(room_id, db)

    update_data = room_update.model_dump(exclude_unset=True)
    for key, value in update_data.items():
        setattr(db_room, key, value)

    db.commit()
    db.refresh(db_room)
    return db_room


@router.delete("/{room_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_room(room_id: int, db: Session = Depends(get_db), identity: str = Depends(get_current_identity)):
    """
    Delete a room type.
    Requires authentication.
    """
    db_room = get_room_or_404(room_id, db)
    if db.query(BookingRoom).filter(BookingRoom.room_id == room_id).first():
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"Room with ID {room_id} has bookings.")
    db.delete(db_room)
    db.commit()
    return None


@router.get("/{room_id}/availability", response_model=RoomAvailability)
def get_room_availability(
    room_id: int,
    check_in_date: date,
    check_out_date: date,
    db: Session = Depends(get_db),
    identity: str = Depends(get_current_identity),
):
    """
    Report how many units of a room type are free for a stay.

    - **check_in_date**: first night of the stay.
    - **check_out_date**: departure day, exclusive.
    """
    if check_out_date <= check_in_date:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=InvalidDateRangeError().message)
    room = get_room_or_404(room_id, db)
    overlapping = SqlBookingStore(db).find_overlapping_bookings(room.hotel_id, check_in_date, check_out_date)
    committed = count_committed_units(overlapping, room.id)
    return RoomAvailability(
        room_id=room.id,
        check_in_date=check_in_date,
        check_out_date=check_out_date,
        quantity=room.quantity,
        committed=committed,
        available=max(room.quantity - committed, 0),
    )
