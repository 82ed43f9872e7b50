from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from drivent.platform.logging.loguru_io import Logger
from drivent.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo
from drivent.service.ticketing.domain.entity.ticket_entity import TicketEntity, TicketTypeEntity
from drivent.service.ticketing.driven_adapter.model.enrollment_model import EnrollmentModel
from drivent.service.ticketing.driven_adapter.model.ticket_model import TicketModel, TicketTypeModel
from drivent.service.ticketing.driven_adapter.repo.ticket_mapper import (
    ticket_model_to_entity,
    ticket_type_model_to_entity,
)


class TicketQueryRepoImpl(ITicketQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def list_ticket_types(self) -> List[TicketTypeEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(TicketTypeModel).order_by(TicketTypeModel.id))
            return [ticket_type_model_to_entity(model) for model in result.scalars().all()]

    @Logger.io
    async def get_ticket_type_by_id(self, *, ticket_type_id: int) -> Optional[TicketTypeEntity]:
        async with self.session_factory() as session:
            ticket_type_model = await session.get(TicketTypeModel, ticket_type_id)
            return ticket_type_model_to_entity(ticket_type_model) if ticket_type_model else None

    @Logger.io
    async def get_by_enrollment_id(self, *, enrollment_id: int) -> Optional[TicketEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(TicketModel)
                .options(selectinload(TicketModel.ticket_type))
                .where(TicketModel.enrollment_id == enrollment_id)
                .order_by(TicketModel.id.desc())
                .limit(1)
            )
            ticket_model = result.scalar_one_or_none()
            return ticket_model_to_entity(ticket_model) if ticket_model else None

    @Logger.io
    async def get_by_id(self, *, ticket_id: int) -> Optional[TicketEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(TicketModel)
                .options(selectinload(TicketModel.ticket_type))
                .where(TicketModel.id == ticket_id)
            )
            ticket_model = result.scalar_one_or_none()
            return ticket_model_to_entity(ticket_model) if ticket_model else None

    @Logger.io
    async def get_owner_user_id(self, *, ticket_id: int) -> Optional[int]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(EnrollmentModel.user_id)
                .join(TicketModel, TicketModel.enrollment_id == EnrollmentModel.id)
                .where(TicketModel.id == ticket_id)
            )
            return result.scalar_one_or_none()
