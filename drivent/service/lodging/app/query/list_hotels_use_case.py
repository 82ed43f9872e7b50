from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from drivent.platform.config.di import Container
from drivent.platform.exception.exceptions import NotFoundError, PaymentRequiredError
from drivent.platform.logging.loguru_io import Logger
from drivent.service.lodging.app.interface.i_hotel_query_repo import IHotelQueryRepo
from drivent.service.lodging.app.query.lodging_ticket_lookup import find_user_ticket
from drivent.service.lodging.domain.entity.hotel_entity import HotelEntity
from drivent.service.ticketing.app.interface.i_enrollment_query_repo import (
    IEnrollmentQueryRepo,
)
from drivent.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo


LODGING_NOT_INCLUDED_MESSAGE = 'Ticket must be paid, in person and include a hotel'


class ListHotelsUseCase:
    def __init__(
        self,
        *,
        hotel_query_repo: IHotelQueryRepo,
        enrollment_query_repo: IEnrollmentQueryRepo,
        ticket_query_repo: ITicketQueryRepo,
    ) -> None:
        self.hotel_query_repo = hotel_query_repo
        self.enrollment_query_repo = enrollment_query_repo
        self.ticket_query_repo = ticket_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        hotel_query_repo: IHotelQueryRepo = Depends(Provide[Container.hotel_query_repo]),
        enrollment_query_repo: IEnrollmentQueryRepo = Depends(
            Provide[Container.enrollment_query_repo]
        ),
        ticket_query_repo: ITicketQueryRepo = Depends(Provide[Container.ticket_query_repo]),
    ) -> Self:
        return cls(
            hotel_query_repo=hotel_query_repo,
            enrollment_query_repo=enrollment_query_repo,
            ticket_query_repo=ticket_query_repo,
        )

    async def validate_lodging_access(self, *, user_id: int) -> None:
        """
        Raises:
            NotFoundError: no enrollment or no ticket
            PaymentRequiredError: ticket unpaid, remote, or without hotel
        """
        ticket = await find_user_ticket(
            user_id=user_id,
            enrollment_query_repo=self.enrollment_query_repo,
            ticket_query_repo=self.ticket_query_repo,
        )
        if ticket is None:
            raise NotFoundError()
        if not ticket.grants_lodging:
            raise PaymentRequiredError(LODGING_NOT_INCLUDED_MESSAGE)

    @Logger.io
    async def list_hotels(self, *, user_id: int) -> List[HotelEntity]:
        await self.validate_lodging_access(user_id=user_id)

        hotels = await self.hotel_query_repo.list_hotels()
        if not hotels:
            raise NotFoundError()
        return hotels
