from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from drivent.platform.logging.loguru_io import Logger
from drivent.service.ticketing.app.interface.i_payment_query_repo import IPaymentQueryRepo
from drivent.service.ticketing.domain.entity.payment_entity import PaymentEntity
from drivent.service.ticketing.driven_adapter.model.payment_model import PaymentModel


def payment_model_to_entity(payment_model: PaymentModel) -> PaymentEntity:
    return PaymentEntity(
        id=payment_model.id,
        ticket_id=payment_model.ticket_id,
        value=payment_model.value,
        card_issuer=payment_model.card_issuer,
        card_last_digits=payment_model.card_last_digits,
        created_at=payment_model.created_at,
        updated_at=payment_model.updated_at,
    )


class PaymentQueryRepoImpl(IPaymentQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_ticket_id(self, *, ticket_id: int) -> Optional[PaymentEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(PaymentModel)
                .where(PaymentModel.ticket_id == ticket_id)
                .order_by(PaymentModel.id.desc())
                .limit(1)
            )
            payment_model = result.scalar_one_or_none()
            return payment_model_to_entity(payment_model) if payment_model else None
