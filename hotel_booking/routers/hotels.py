from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from hotel_booking.db import get_db
from hotel_booking.models.hotel import Hotel
from hotel_booking.schemas.hotel import HotelCreate, HotelResponse
from hotel_booking.schemas.room import RoomResponse
from hotel_booking.utils.auth import get_current_identity


router = APIRouter(
    prefix="/hotels",
    tags=["hotels"],
)


def get_hotel_or_404(hotel_id: int, db: Session) -> Hotel:
    hotel = db.query(Hotel).filter(Hotel.id == hotel_id).first()
    if not hotel:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Hotel not found.")
    return hotel


@router.post("/", response_model=HotelResponse, status_code=status.HTTP_201_CREATED)
def create_hotel(hotel: HotelCreate, db: Session = Depends(get_db), identity: str = Depends(get_current_identity)):
    """
    Create a new hotel.
    Requires authentication.
    """
    db_hotel = Hotel(**hotel.model_dump())
    db.add(db_hotel)
    db.commit()
    db.refresh(db_hotel)
    return db_hotel


@router.get("/", response_model=List[HotelResponse])
def get_hotels(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return db.query(Hotel).offset(skip).limit(limit).all()


@router.get("/{hotel_id}", response_model=HotelResponse)
def get_hotel(hotel_id: int, db: Session = Depends(get_db)):
    return get_hotel_or_404(hotel_id, db)


@router.get("/{hotel_id}/rooms", response_model=List[RoomResponse])
def get_hotel_rooms(hotel_id: int, db: Session = Depends(get_db)):
    """
    List the room types offered by a hotel.
    """
    return get_hotel_or_404(hotel_id, db).rooms
