from typing import AsyncContextManager, Callable

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from drivent.platform.logging.loguru_io import Logger
from drivent.service.shared_kernel.domain.enum.ticket_status import TicketStatus
from drivent.service.ticketing.app.interface.i_payment_command_repo import IPaymentCommandRepo
from drivent.service.ticketing.domain.entity.payment_entity import PaymentEntity
from drivent.service.ticketing.driven_adapter.model.payment_model import PaymentModel
from drivent.service.ticketing.driven_adapter.model.ticket_model import TicketModel
from drivent.service.ticketing.driven_adapter.repo.payment_query_repo_impl import (
    payment_model_to_entity,
)


class PaymentCommandRepoImpl(IPaymentCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create_and_mark_ticket_paid(self, payment: PaymentEntity) -> PaymentEntity:
        async with self.session_factory() as session:
            payment_model = PaymentModel(
                ticket_id=payment.ticket_id,
                value=payment.value,
                card_issuer=payment.card_issuer,
                card_last_digits=payment.card_last_digits,
            )
            session.add(payment_model)
            await session.execute(
                update(TicketModel)
                .where(TicketModel.id == payment.ticket_id)
                .values(status=TicketStatus.PAID.value)
            )
            await session.commit()
            await session.refresh(payment_model)
            return payment_model_to_entity(payment_model)
