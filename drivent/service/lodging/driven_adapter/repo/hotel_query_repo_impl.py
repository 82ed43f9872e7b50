from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from drivent.platform.logging.loguru_io import Logger
from drivent.service.lodging.app.interface.i_hotel_query_repo import IHotelQueryRepo
from drivent.service.lodging.domain.entity.hotel_entity import HotelEntity, RoomEntity
from drivent.service.lodging.driven_adapter.model.hotel_model import HotelModel, RoomModel
from drivent.service.lodging.driven_adapter.repo.lodging_mapper import (
    hotel_model_to_entity,
    room_model_to_entity,
)


class HotelQueryRepoImpl(IHotelQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def list_hotels(self) -> List[HotelEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(HotelModel).order_by(HotelModel.id))
            return [hotel_model_to_entity(model) for model in result.scalars().all()]

    @Logger.io
    async def get_with_rooms(self, *, hotel_id: int) -> Optional[HotelEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(HotelModel)
                .options(selectinload(HotelModel.rooms))
                .where(HotelModel.id == hotel_id)
            )
            hotel_model = result.scalar_one_or_none()
            return hotel_model_to_entity(hotel_model, with_rooms=True) if hotel_model else None

    @Logger.io
    async def get_room_by_id(self, *, room_id: int) -> Optional[RoomEntity]:
        async with self.session_factory() as session:
            room_model = await session.get(RoomModel, room_id)
            return room_model_to_entity(room_model) if room_model else None
