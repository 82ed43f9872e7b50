from abc import ABC, abstractmethod
from typing import List, Optional

from drivent.service.ticketing.domain.entity.ticket_entity import TicketEntity, TicketTypeEntity


class ITicketQueryRepo(ABC):
    @abstractmethod
    async def list_ticket_types(self) -> List[TicketTypeEntity]:
        pass

    @abstractmethod
    async def get_ticket_type_by_id(self, *, ticket_type_id: int) -> Optional[TicketTypeEntity]:
        pass

    @abstractmethod
    async def get_by_enrollment_id(self, *, enrollment_id: int) -> Optional[TicketEntity]:
        """Ticket of the enrollment with its TicketType loaded."""
        pass

    @abstractmethod
    async def get_by_id(self, *, ticket_id: int) -> Optional[TicketEntity]:
        """Ticket with its TicketType loaded."""
        pass

    @abstractmethod
    async def get_owner_user_id(self, *, ticket_id: int) -> Optional[int]:
        """User id of the enrollment holding the ticket."""
        pass
