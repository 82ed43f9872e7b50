from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from drivent.platform.logging.loguru_io import Logger
from drivent.service.lodging.app.interface.i_booking_query_repo import IBookingQueryRepo
from drivent.service.lodging.domain.entity.booking_entity import BookingEntity
from drivent.service.lodging.driven_adapter.model.booking_model import BookingModel
from drivent.service.lodging.driven_adapter.repo.lodging_mapper import booking_model_to_entity


class BookingQueryRepoImpl(IBookingQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_user_id(self, *, user_id: int) -> Optional[BookingEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(BookingModel)
                .options(selectinload(BookingModel.room))
                .where(BookingModel.user_id == user_id)
                .order_by(BookingModel.id)
                .limit(1)
            )
            booking_model = result.scalar_one_or_none()
            return booking_model_to_entity(booking_model) if booking_model else None

    @Logger.io
    async def get_by_id(self, *, booking_id: int) -> Optional[BookingEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(BookingModel)
                .options(selectinload(BookingModel.room))
                .where(BookingModel.id == booking_id)
            )
            booking_model = result.scalar_one_or_none()
            return booking_model_to_entity(booking_model) if booking_model else None

    @Logger.io
    async def count_by_room_id(self, *, room_id: int) -> int:
        async with self.session_factory() as session:
            result = await session.execute(
                select(func.count(BookingModel.id)).where(BookingModel.room_id == room_id)
            )
            return result.scalar_one()
