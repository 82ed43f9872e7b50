from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from drivent.platform.config.di import Container
from drivent.platform.exception.exceptions import NotFoundError
from drivent.platform.logging.loguru_io import Logger
from drivent.platform.metrics.drivent_metrics import metrics
from drivent.service.lodging.app.interface.i_booking_command_repo import IBookingCommandRepo
from drivent.service.lodging.app.interface.i_booking_query_repo import IBookingQueryRepo


class CancelBookingUseCase:
    def __init__(
        self,
        *,
        booking_command_repo: IBookingCommandRepo,
        booking_query_repo: IBookingQueryRepo,
    ) -> None:
        self.booking_command_repo = booking_command_repo
        self.booking_query_repo = booking_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_command_repo: IBookingCommandRepo = Depends(
            Provide[Container.booking_command_repo]
        ),
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(booking_command_repo=booking_command_repo, booking_query_repo=booking_query_repo)

    @Logger.io
    async def cancel(self, *, user_id: int, booking_id: int) -> int:
        booking = await self.booking_query_repo.get_by_id(booking_id=booking_id)
        if booking is None:
            raise NotFoundError('Booking not found')
        booking.validate_owner(user_id=user_id)

        await self.booking_command_repo.delete(booking_id=booking_id)

        metrics.record_booking(operation='cancel', result='success')
        Logger.base.info(f'🏨 [BOOKING] User {user_id} cancelled booking {booking_id}')
        return booking_id
