from fastapi import APIRouter, Depends, Path, status

from drivent.platform.logging.loguru_io import Logger
from drivent.service.lodging.app.command.cancel_booking_use_case import CancelBookingUseCase
from drivent.service.lodging.app.command.change_booking_room_use_case import (
    ChangeBookingRoomUseCase,
)
from drivent.service.lodging.app.command.create_booking_use_case import CreateBookingUseCase
from drivent.service.lodging.app.query.get_booking_use_case import GetBookingUseCase
from drivent.service.lodging.driving_adapter.http_controller.hotel_controller import (
    to_room_response,
)
from drivent.service.lodging.driving_adapter.http_controller.schema.booking_schema import (
    BookingIdResponse,
    BookingResponse,
    BookingRoomRequest,
)
from drivent.service.ticketing.driving_adapter.http_controller.auth.session_auth import (
    get_current_user_id,
)


router = APIRouter()


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def get_booking(
    user_id: int = Depends(get_current_user_id),
    use_case: GetBookingUseCase = Depends(GetBookingUseCase.depends),
) -> BookingResponse:
    booking = await use_case.get_by_user_id(user_id=user_id)
    if booking.room is None:
        raise ValueError('Room should be loaded with the booking.')
    return BookingResponse(id=booking.id or 0, room=to_room_response(booking.room))


@router.post('', status_code=status.HTTP_200_OK)
@Logger.io
async def create_booking(
    request: BookingRoomRequest,
    user_id: int = Depends(get_current_user_id),
    use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingIdResponse:
    booking = await use_case.create_booking(user_id=user_id, room_id=request.room_id)
    return BookingIdResponse(booking_id=booking.id or 0)


@router.put('/{booking_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def change_booking_room(
    request: BookingRoomRequest,
    booking_id: int = Path(ge=1),
    user_id: int = Depends(get_current_user_id),
    use_case: ChangeBookingRoomUseCase = Depends(ChangeBookingRoomUseCase.depends),
) -> BookingIdResponse:
    booking = await use_case.change_room(
        user_id=user_id, booking_id=booking_id, room_id=request.room_id
    )
    return BookingIdResponse(booking_id=booking.id or 0)


@router.delete('/{booking_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def cancel_booking(
    booking_id: int = Path(ge=1),
    user_id: int = Depends(get_current_user_id),
    use_case: CancelBookingUseCase = Depends(CancelBookingUseCase.depends),
) -> BookingIdResponse:
    cancelled_id = await use_case.cancel(user_id=user_id, booking_id=booking_id)
    return BookingIdResponse(booking_id=cancelled_id)
