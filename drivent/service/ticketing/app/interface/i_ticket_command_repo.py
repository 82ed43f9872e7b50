from abc import ABC, abstractmethod

from drivent.service.ticketing.domain.entity.ticket_entity import TicketEntity


class ITicketCommandRepo(ABC):
    @abstractmethod
    async def create(self, ticket: TicketEntity) -> TicketEntity:
        pass
