from abc import ABC, abstractmethod
from typing import Optional

from drivent.service.ticketing.domain.entity.payment_entity import PaymentEntity


class IPaymentQueryRepo(ABC):
    @abstractmethod
    async def get_by_ticket_id(self, *, ticket_id: int) -> Optional[PaymentEntity]:
        pass
