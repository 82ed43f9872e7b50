from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from drivent.platform.config.di import Container
from drivent.platform.logging.loguru_io import Logger
from drivent.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo
from drivent.service.ticketing.domain.entity.ticket_entity import TicketTypeEntity


class ListTicketTypesUseCase:
    def __init__(self, ticket_query_repo: ITicketQueryRepo) -> None:
        self.ticket_query_repo = ticket_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        ticket_query_repo: ITicketQueryRepo = Depends(Provide[Container.ticket_query_repo]),
    ) -> Self:
        return cls(ticket_query_repo=ticket_query_repo)

    @Logger.io
    async def list_ticket_types(self) -> List[TicketTypeEntity]:
        return await self.ticket_query_repo.list_ticket_types()
