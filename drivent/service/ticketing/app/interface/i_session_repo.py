from abc import ABC, abstractmethod
from typing import Optional

from drivent.service.ticketing.domain.entity.session_entity import SessionEntity


class ISessionRepo(ABC):
    @abstractmethod
    async def create(self, session_entity: SessionEntity) -> SessionEntity:
        pass

    @abstractmethod
    async def get_by_token(self, *, token: str) -> Optional[SessionEntity]:
        pass
