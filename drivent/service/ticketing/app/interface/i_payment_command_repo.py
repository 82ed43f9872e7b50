from abc import ABC, abstractmethod

from drivent.service.ticketing.domain.entity.payment_entity import PaymentEntity


class IPaymentCommandRepo(ABC):
    @abstractmethod
    async def create_and_mark_ticket_paid(self, payment: PaymentEntity) -> PaymentEntity:
        """Persist the payment and flip its ticket to PAID in one transaction."""
        pass
