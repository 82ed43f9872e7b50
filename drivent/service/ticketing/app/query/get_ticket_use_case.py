from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from drivent.platform.config.di import Container
from drivent.platform.exception.exceptions import NotFoundError
from drivent.platform.logging.loguru_io import Logger
from drivent.service.ticketing.app.interface.i_enrollment_query_repo import (
    IEnrollmentQueryRepo,
)
from drivent.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo
from drivent.service.ticketing.domain.entity.ticket_entity import TicketEntity


class GetTicketUseCase:
    def __init__(
        self,
        *,
        enrollment_query_repo: IEnrollmentQueryRepo,
        ticket_query_repo: ITicketQueryRepo,
    ) -> None:
        self.enrollment_query_repo = enrollment_query_repo
        self.ticket_query_repo = ticket_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        enrollment_query_repo: IEnrollmentQueryRepo = Depends(
            Provide[Container.enrollment_query_repo]
        ),
        ticket_query_repo: ITicketQueryRepo = Depends(Provide[Container.ticket_query_repo]),
    ) -> Self:
        return cls(enrollment_query_repo=enrollment_query_repo, ticket_query_repo=ticket_query_repo)

    @Logger.io
    async def get_by_user_id(self, *, user_id: int) -> TicketEntity:
        enrollment = await self.enrollment_query_repo.get_with_address_by_user_id(user_id=user_id)
        if enrollment is None or enrollment.id is None:
            raise NotFoundError()

        ticket = await self.ticket_query_repo.get_by_enrollment_id(enrollment_id=enrollment.id)
        if ticket is None:
            raise NotFoundError()
        return ticket
