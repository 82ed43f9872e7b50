from drivent.platform.exception.exceptions import NotFoundError
from drivent.service.lodging.app.interface.i_booking_query_repo import IBookingQueryRepo
from drivent.service.lodging.app.interface.i_hotel_query_repo import IHotelQueryRepo
from drivent.service.lodging.domain.entity.hotel_entity import RoomEntity


async def ensure_room_vacancy(
    *,
    room_id: int,
    hotel_query_repo: IHotelQueryRepo,
    booking_query_repo: IBookingQueryRepo,
) -> RoomEntity:
    """
    Count-then-insert capacity check. Every existing booking of the room counts,
    including one the caller may already hold there.

    Raises:
        NotFoundError: room does not exist
        ForbiddenError: room is full
    """
    room = await hotel_query_repo.get_room_by_id(room_id=room_id)
    if room is None:
        raise NotFoundError('Room not found')

    booking_count = await booking_query_repo.count_by_room_id(room_id=room_id)
    room.validate_vacancy(booking_count=booking_count)
    return room
