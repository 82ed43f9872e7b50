from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from drivent.platform.logging.loguru_io import Logger
from drivent.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from drivent.service.ticketing.domain.entity.event_entity import EventEntity
from drivent.service.ticketing.driven_adapter.model.event_model import EventModel


class EventQueryRepoImpl(IEventQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_first(self) -> Optional[EventEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(EventModel).order_by(EventModel.id).limit(1))
            event_model = result.scalar_one_or_none()

            if not event_model:
                return None

            return EventEntity(
                id=event_model.id,
                title=event_model.title,
                background_image_url=event_model.background_image_url,
                logo_image_url=event_model.logo_image_url,
                starts_at=event_model.starts_at,
                ends_at=event_model.ends_at,
                created_at=event_model.created_at,
                updated_at=event_model.updated_at,
            )
