from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from drivent.platform.config.di import Container
from drivent.platform.exception.exceptions import NotFoundError
from drivent.platform.logging.loguru_io import Logger
from drivent.service.lodging.app.interface.i_booking_query_repo import IBookingQueryRepo
from drivent.service.lodging.domain.entity.booking_entity import BookingEntity


class GetBookingUseCase:
    def __init__(self, booking_query_repo: IBookingQueryRepo) -> None:
        self.booking_query_repo = booking_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo)

    @Logger.io
    async def get_by_user_id(self, *, user_id: int) -> BookingEntity:
        booking = await self.booking_query_repo.get_by_user_id(user_id=user_id)
        if booking is None:
            raise NotFoundError('You have no booking')
        return booking
