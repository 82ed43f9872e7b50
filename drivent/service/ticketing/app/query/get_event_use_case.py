from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from drivent.platform.config.di import Container
from drivent.platform.exception.exceptions import NotFoundError
from drivent.platform.logging.loguru_io import Logger
from drivent.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from drivent.service.ticketing.domain.entity.event_entity import EventEntity


class GetEventUseCase:
    def __init__(self, event_query_repo: IEventQueryRepo) -> None:
        self.event_query_repo = event_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
    ) -> Self:
        return cls(event_query_repo=event_query_repo)

    @Logger.io
    async def get_first(self) -> EventEntity:
        """The platform hosts a single event."""
        event = await self.event_query_repo.get_first()
        if event is None:
            raise NotFoundError()
        return event
