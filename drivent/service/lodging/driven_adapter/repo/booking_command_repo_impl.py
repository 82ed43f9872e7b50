from typing import AsyncContextManager, Callable

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from drivent.platform.exception.exceptions import NotFoundError
from drivent.platform.logging.loguru_io import Logger
from drivent.service.lodging.app.interface.i_booking_command_repo import IBookingCommandRepo
from drivent.service.lodging.domain.entity.booking_entity import BookingEntity
from drivent.service.lodging.driven_adapter.model.booking_model import BookingModel
from drivent.service.lodging.driven_adapter.repo.lodging_mapper import booking_model_to_entity


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    async def _load(self, session: AsyncSession, booking_id: int) -> BookingEntity:
        result = await session.execute(
            select(BookingModel)
            .options(selectinload(BookingModel.room))
            .where(BookingModel.id == booking_id)
            .execution_options(populate_existing=True)
        )
        booking_model = result.scalar_one_or_none()
        if booking_model is None:
            raise NotFoundError('Booking not found')
        return booking_model_to_entity(booking_model)

    @Logger.io
    async def create(self, booking: BookingEntity) -> BookingEntity:
        async with self.session_factory() as session:
            booking_model = BookingModel(user_id=booking.user_id, room_id=booking.room_id)
            session.add(booking_model)
            await session.commit()
            return await self._load(session, booking_model.id)

    @Logger.io
    async def update_room(self, *, booking_id: int, room_id: int) -> BookingEntity:
        async with self.session_factory() as session:
            await session.execute(
                update(BookingModel).where(BookingModel.id == booking_id).values(room_id=room_id)
            )
            await session.commit()
            return await self._load(session, booking_id)

    @Logger.io
    async def delete(self, *, booking_id: int) -> None:
        async with self.session_factory() as session:
            await session.execute(delete(BookingModel).where(BookingModel.id == booking_id))
            await session.commit()
