from typing import AsyncContextManager, Callable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from drivent.platform.logging.loguru_io import Logger
from drivent.service.ticketing.app.interface.i_ticket_command_repo import ITicketCommandRepo
from drivent.service.ticketing.domain.entity.ticket_entity import TicketEntity
from drivent.service.ticketing.driven_adapter.model.ticket_model import TicketModel
from drivent.service.ticketing.driven_adapter.repo.ticket_mapper import ticket_model_to_entity


class TicketCommandRepoImpl(ITicketCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, ticket: TicketEntity) -> TicketEntity:
        async with self.session_factory() as session:
            ticket_model = TicketModel(
                ticket_type_id=ticket.ticket_type_id,
                enrollment_id=ticket.enrollment_id,
                status=ticket.status.value,
            )
            session.add(ticket_model)
            await session.commit()

            result = await session.execute(
                select(TicketModel)
                .options(selectinload(TicketModel.ticket_type))
                .where(TicketModel.id == ticket_model.id)
                .execution_options(populate_existing=True)
            )
            return ticket_model_to_entity(result.scalar_one())
