from datetime import date
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

class RoomBase(BaseModel):
    name: str
    quantity: int = Field(..., ge=0)

class RoomCreate(RoomBase):
    hotel_id: int

class RoomUpdate(BaseModel):
    name: Optional[str] = None
    quantity: Optional[int] = Field(None, ge=0)

class RoomResponse(RoomBase):
    id: int
    hotel_id: int

    model_config = ConfigDict(from_attributes=True)

class RoomAvailability(BaseModel):
    room_id: int
    check_in_date: date
    check_out_date: date
    quantity: int
    committed: int
    available: int
