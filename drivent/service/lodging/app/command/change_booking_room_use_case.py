from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from drivent.platform.config.di import Container
from drivent.platform.exception.exceptions import CustomBaseError, ForbiddenError
from drivent.platform.logging.loguru_io import Logger
from drivent.platform.metrics.drivent_metrics import metrics
from drivent.service.lodging.app.command.room_vacancy_check import ensure_room_vacancy
from drivent.service.lodging.app.interface.i_booking_command_repo import IBookingCommandRepo
from drivent.service.lodging.app.interface.i_booking_query_repo import IBookingQueryRepo
from drivent.service.lodging.app.interface.i_hotel_query_repo import IHotelQueryRepo
from drivent.service.lodging.domain.entity.booking_entity import BookingEntity


class ChangeBookingRoomUseCase:
    def __init__(
        self,
        *,
        booking_command_repo: IBookingCommandRepo,
        booking_query_repo: IBookingQueryRepo,
        hotel_query_repo: IHotelQueryRepo,
    ) -> None:
        self.booking_command_repo = booking_command_repo
        self.booking_query_repo = booking_query_repo
        self.hotel_query_repo = hotel_query_repo
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        booking_command_repo: IBookingCommandRepo = Depends(
            Provide[Container.booking_command_repo]
        ),
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
        hotel_query_repo: IHotelQueryRepo = Depends(Provide[Container.hotel_query_repo]),
    ) -> Self:
        return cls(
            booking_command_repo=booking_command_repo,
            booking_query_repo=booking_query_repo,
            hotel_query_repo=hotel_query_repo,
        )

    @Logger.io
    async def change_room(self, *, user_id: int, booking_id: int, room_id: int) -> BookingEntity:
        """
        Move the caller's booking to another room.

        Raises:
            NotFoundError: room does not exist
            ForbiddenError: room is full, or the caller holds no booking with this id
        """
        with self.tracer.start_as_current_span(
            'use_case.change_booking_room',
            attributes={'user.id': user_id, 'booking.id': booking_id, 'room.id': room_id},
        ):
            try:
                room = await ensure_room_vacancy(
                    room_id=room_id,
                    hotel_query_repo=self.hotel_query_repo,
                    booking_query_repo=self.booking_query_repo,
                )

                booking = await self.booking_query_repo.get_by_user_id(user_id=user_id)
                if booking is None or booking.id != booking_id:
                    raise ForbiddenError('You have no booking with this id')

                booking.move_to(room)
                updated = await self.booking_command_repo.update_room(
                    booking_id=booking_id, room_id=booking.room_id
                )
            except CustomBaseError:
                metrics.record_booking(operation='change', result='rejected')
                raise

        metrics.record_booking(operation='change', result='success')
        return updated
