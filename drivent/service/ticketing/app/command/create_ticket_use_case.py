from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from drivent.platform.config.di import Container
from drivent.platform.exception.exceptions import NotFoundError
from drivent.platform.logging.loguru_io import Logger
from drivent.platform.metrics.drivent_metrics import metrics
from drivent.service.ticketing.app.interface.i_enrollment_query_repo import (
    IEnrollmentQueryRepo,
)
from drivent.service.ticketing.app.interface.i_ticket_command_repo import ITicketCommandRepo
from drivent.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo
from drivent.service.ticketing.domain.entity.ticket_entity import TicketEntity


class CreateTicketUseCase:
    def __init__(
        self,
        *,
        enrollment_query_repo: IEnrollmentQueryRepo,
        ticket_query_repo: ITicketQueryRepo,
        ticket_command_repo: ITicketCommandRepo,
    ) -> None:
        self.enrollment_query_repo = enrollment_query_repo
        self.ticket_query_repo = ticket_query_repo
        self.ticket_command_repo = ticket_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        enrollment_query_repo: IEnrollmentQueryRepo = Depends(
            Provide[Container.enrollment_query_repo]
        ),
        ticket_query_repo: ITicketQueryRepo = Depends(Provide[Container.ticket_query_repo]),
        ticket_command_repo: ITicketCommandRepo = Depends(Provide[Container.ticket_command_repo]),
    ) -> Self:
        return cls(
            enrollment_query_repo=enrollment_query_repo,
            ticket_query_repo=ticket_query_repo,
            ticket_command_repo=ticket_command_repo,
        )

    @Logger.io
    async def reserve(self, *, user_id: int, ticket_type_id: int) -> TicketEntity:
        enrollment = await self.enrollment_query_repo.get_with_address_by_user_id(user_id=user_id)
        if enrollment is None or enrollment.id is None:
            raise NotFoundError()

        ticket_type = await self.ticket_query_repo.get_ticket_type_by_id(
            ticket_type_id=ticket_type_id
        )
        if ticket_type is None:
            raise NotFoundError()

        ticket = await self.ticket_command_repo.create(
            TicketEntity.reserve(enrollment_id=enrollment.id, ticket_type=ticket_type)
        )

        metrics.tickets_reserved.labels(ticket_type_id=str(ticket_type_id)).inc()
        Logger.base.info(f'🎫 [TICKET] Reserved ticket {ticket.id} for enrollment {enrollment.id}')
        return ticket
