from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from drivent.platform.config.di import Container
from drivent.platform.exception.exceptions import AuthenticationError, NotFoundError
from drivent.platform.logging.loguru_io import Logger
from drivent.platform.metrics.drivent_metrics import metrics
from drivent.service.ticketing.app.interface.i_payment_command_repo import IPaymentCommandRepo
from drivent.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo
from drivent.service.ticketing.domain.entity.payment_entity import PaymentEntity


class ProcessPaymentUseCase:
    """
    Mock payment: the card is never charged.

    Flow:
    1. Ticket must exist and belong to the caller
    2. Persist issuer + last digits with the ticket type price as value
    3. Flip the ticket to PAID in the same transaction
    """

    def __init__(
        self,
        *,
        ticket_query_repo: ITicketQueryRepo,
        payment_command_repo: IPaymentCommandRepo,
    ) -> None:
        self.ticket_query_repo = ticket_query_repo
        self.payment_command_repo = payment_command_repo
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        ticket_query_repo: ITicketQueryRepo = Depends(Provide[Container.ticket_query_repo]),
        payment_command_repo: IPaymentCommandRepo = Depends(
            Provide[Container.payment_command_repo]
        ),
    ) -> Self:
        return cls(ticket_query_repo=ticket_query_repo, payment_command_repo=payment_command_repo)

    @Logger.io
    async def process(
        self, *, user_id: int, ticket_id: int, card_issuer: str, card_number: str
    ) -> PaymentEntity:
        with self.tracer.start_as_current_span(
            'use_case.process_payment',
            attributes={'user.id': user_id, 'ticket.id': ticket_id},
        ):
            ticket = await self.ticket_query_repo.get_by_id(ticket_id=ticket_id)
            if ticket is None or ticket.ticket_type is None:
                raise NotFoundError()

            owner_id = await self.ticket_query_repo.get_owner_user_id(ticket_id=ticket_id)
            if owner_id != user_id:
                raise AuthenticationError('Ticket does not belong to the signed-in user')

            payment = PaymentEntity.from_card(
                ticket_id=ticket_id,
                value=ticket.ticket_type.price,
                card_issuer=card_issuer,
                card_number=card_number,
            )
            saved = await self.payment_command_repo.create_and_mark_ticket_paid(payment)

        metrics.record_payment(card_issuer=card_issuer, value=saved.value)
        Logger.base.info(f'💳 [PAYMENT] Ticket {ticket_id} paid ({card_issuer})')
        return saved
