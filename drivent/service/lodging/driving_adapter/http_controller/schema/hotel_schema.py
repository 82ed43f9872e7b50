from datetime import datetime
from typing import List

from pydantic import Field

from drivent.service.shared_kernel.driving_adapter.schema.camel_schema import CamelModel


class RoomResponse(CamelModel):
    id: int
    name: str
    capacity: int
    hotel_id: int
    created_at: datetime
    updated_at: datetime


class HotelResponse(CamelModel):
    id: int
    name: str
    image: str
    created_at: datetime
    updated_at: datetime


class HotelWithRoomsResponse(HotelResponse):
    rooms: List[RoomResponse] = Field(alias='Rooms')
