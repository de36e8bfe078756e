from pydantic import BaseModel, ConfigDict
from typing import Optional

class HotelBase(BaseModel):
    name: str
    address: Optional[str] = None

class HotelCreate(HotelBase):
    pass

class HotelResponse(HotelBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
