from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from drivent.platform.config.di import Container
from drivent.platform.exception.exceptions import AuthenticationError, NotFoundError
from drivent.platform.logging.loguru_io import Logger
from drivent.service.ticketing.app.interface.i_payment_query_repo import IPaymentQueryRepo
from drivent.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo
from drivent.service.ticketing.domain.entity.payment_entity import PaymentEntity


class GetPaymentUseCase:
    def __init__(
        self,
        *,
        ticket_query_repo: ITicketQueryRepo,
        payment_query_repo: IPaymentQueryRepo,
    ) -> None:
        self.ticket_query_repo = ticket_query_repo
        self.payment_query_repo = payment_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        ticket_query_repo: ITicketQueryRepo = Depends(Provide[Container.ticket_query_repo]),
        payment_query_repo: IPaymentQueryRepo = Depends(Provide[Container.payment_query_repo]),
    ) -> Self:
        return cls(ticket_query_repo=ticket_query_repo, payment_query_repo=payment_query_repo)

    @Logger.io
    async def get_by_ticket_id(self, *, user_id: int, ticket_id: int) -> PaymentEntity:
        """
        Raises:
            NotFoundError: ticket or payment missing
            AuthenticationError: ticket belongs to another user
        """
        if await self.ticket_query_repo.get_by_id(ticket_id=ticket_id) is None:
            raise NotFoundError()

        owner_id = await self.ticket_query_repo.get_owner_user_id(ticket_id=ticket_id)
        if owner_id != user_id:
            raise AuthenticationError('Ticket does not belong to the signed-in user')

        payment = await self.payment_query_repo.get_by_ticket_id(ticket_id=ticket_id)
        if payment is None:
            raise NotFoundError()
        return payment
