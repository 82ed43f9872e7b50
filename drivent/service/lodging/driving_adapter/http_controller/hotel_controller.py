from typing import List

from fastapi import APIRouter, Depends, Path, status

from drivent.platform.logging.loguru_io import Logger
from drivent.service.lodging.app.query.get_hotel_with_rooms_use_case import (
    GetHotelWithRoomsUseCase,
)
from drivent.service.lodging.app.query.list_hotels_use_case import ListHotelsUseCase
from drivent.service.lodging.domain.entity.hotel_entity import HotelEntity, RoomEntity
from drivent.service.lodging.driving_adapter.http_controller.schema.hotel_schema import (
    HotelResponse,
    HotelWithRoomsResponse,
    RoomResponse,
)
from drivent.service.ticketing.driving_adapter.http_controller.auth.session_auth import (
    get_current_user_id,
)


router = APIRouter()


def to_room_response(room: RoomEntity) -> RoomResponse:
    return RoomResponse(
        id=room.id or 0,
        name=room.name,
        capacity=room.capacity,
        hotel_id=room.hotel_id,
        created_at=room.created_at,
        updated_at=room.updated_at,
    )


def _to_hotel_response(hotel: HotelEntity) -> HotelResponse:
    return HotelResponse(
        id=hotel.id or 0,
        name=hotel.name,
        image=hotel.image,
        created_at=hotel.created_at,
        updated_at=hotel.updated_at,
    )


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_hotels(
    user_id: int = Depends(get_current_user_id),
    use_case: ListHotelsUseCase = Depends(ListHotelsUseCase.depends),
) -> List[HotelResponse]:
    hotels = await use_case.list_hotels(user_id=user_id)
    return [_to_hotel_response(hotel) for hotel in hotels]


@router.get('/{hotel_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_hotel_with_rooms(
    hotel_id: int = Path(ge=1),
    user_id: int = Depends(get_current_user_id),
    use_case: GetHotelWithRoomsUseCase = Depends(GetHotelWithRoomsUseCase.depends),
) -> HotelWithRoomsResponse:
    hotel = await use_case.get_hotel(user_id=user_id, hotel_id=hotel_id)
    return HotelWithRoomsResponse(
        id=hotel.id or 0,
        name=hotel.name,
        image=hotel.image,
        created_at=hotel.created_at,
        updated_at=hotel.updated_at,
        rooms=[to_room_response(room) for room in hotel.rooms],
    )
