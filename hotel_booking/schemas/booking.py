from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BookingRequest(BaseModel):
    hotel_id: int
    room_ids: List[int] = Field(..., min_length=1)
    check_in_date: date
    check_out_date: date
    number_of_guests: int = 1
    status: str = "PENDING"


class BookingCreatedResponse(BaseModel):
    message: str
    booking_id: int
    invoice_id: int


class InvoiceResponse(BaseModel):
    id: int
    invoice_number: str
    issued_at: datetime
    nights: int
    room_count: int
    number_of_guests: int
    status: str

    model_config = ConfigDict(from_attributes=True)


class BookingResponse(BaseModel):
    id: int
    user_id: int
    hotel_id: int
    room_ids: List[int]
    check_in_date: date
    check_out_date: date
    number_of_guests: int
    status: str
    invoice: Optional[InvoiceResponse] = None

    model_config = ConfigDict(from_attributes=True)
