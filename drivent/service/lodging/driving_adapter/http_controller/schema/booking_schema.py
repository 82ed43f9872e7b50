from pydantic import Field

from drivent.service.lodging.driving_adapter.http_controller.schema.hotel_schema import (
    RoomResponse,
)
from drivent.service.shared_kernel.driving_adapter.schema.camel_schema import CamelModel


class BookingRoomRequest(CamelModel):
    model_config = {'json_schema_extra': {'example': {'roomId': 1}}}

    room_id: int = Field(ge=1)


class BookingIdResponse(CamelModel):
    booking_id: int


class BookingResponse(CamelModel):
    id: int
    room: RoomResponse = Field(alias='Room')
