from unittest.mock import AsyncMock

import pytest

from drivent.platform.exception.exceptions import AuthenticationError, NotFoundError
from drivent.service.ticketing.app.command.process_payment_use_case import (
    ProcessPaymentUseCase,
)
from drivent.service.ticketing.domain.entity.payment_entity import PaymentEntity
from drivent.service.ticketing.domain.entity.ticket_entity import TicketEntity, TicketTypeEntity


TICKET_ID = 5


@pytest.fixture
def ticket_query_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.get_by_id.return_value = TicketEntity(
        ticket_type_id=1,
        enrollment_id=11,
        ticket_type=TicketTypeEntity(
            name='Presencial + Hotel', price=600, is_remote=False, includes_hotel=True, id=1
        ),
        id=TICKET_ID,
    )
    repo.get_owner_user_id.return_value = 7
    return repo


@pytest.fixture
def payment_command_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.create_and_mark_ticket_paid.side_effect = lambda payment: PaymentEntity(
        ticket_id=payment.ticket_id,
        value=payment.value,
        card_issuer=payment.card_issuer,
        card_last_digits=payment.card_last_digits,
        id=30,
    )
    return repo


@pytest.fixture
def use_case(ticket_query_repo: AsyncMock, payment_command_repo: AsyncMock) -> ProcessPaymentUseCase:
    return ProcessPaymentUseCase(
        ticket_query_repo=ticket_query_repo, payment_command_repo=payment_command_repo
    )


@pytest.mark.unit
class TestProcessPaymentUseCase:
    @pytest.mark.asyncio
    async def test_pays_with_ticket_type_price(
        self, use_case: ProcessPaymentUseCase, payment_command_repo: AsyncMock
    ):
        # When
        payment = await use_case.process(
            user_id=7, ticket_id=TICKET_ID, card_issuer='VISA', card_number='4111 1111 1111 1234'
        )

        # Then: only issuer and last digits are stored, value comes from the ticket type
        assert payment.id == 30
        assert payment.value == 600
        assert payment.card_issuer == 'VISA'
        assert payment.card_last_digits == '1234'
        payment_command_repo.create_and_mark_ticket_paid.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unknown_ticket_is_not_found(
        self,
        use_case: ProcessPaymentUseCase,
        ticket_query_repo: AsyncMock,
        payment_command_repo: AsyncMock,
    ):
        ticket_query_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await use_case.process(
                user_id=7, ticket_id=TICKET_ID, card_issuer='VISA', card_number='4111111111111111'
            )
        payment_command_repo.create_and_mark_ticket_paid.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_other_users_ticket_is_unauthorized(
        self, use_case: ProcessPaymentUseCase, payment_command_repo: AsyncMock
    ):
        with pytest.raises(AuthenticationError):
            await use_case.process(
                user_id=8, ticket_id=TICKET_ID, card_issuer='VISA', card_number='4111111111111111'
            )
        payment_command_repo.create_and_mark_ticket_paid.assert_not_awaited()
