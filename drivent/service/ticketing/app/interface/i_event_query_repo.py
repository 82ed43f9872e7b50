from abc import ABC, abstractmethod
from typing import Optional

from drivent.service.ticketing.domain.entity.event_entity import EventEntity


class IEventQueryRepo(ABC):
    @abstractmethod
    async def get_first(self) -> Optional[EventEntity]:
        """The platform runs a single event; the earliest created one is current."""
        pass
