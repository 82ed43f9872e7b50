from fastapi import APIRouter, Depends, Query, status

from drivent.platform.logging.loguru_io import Logger
from drivent.service.ticketing.app.command.process_payment_use_case import ProcessPaymentUseCase
from drivent.service.ticketing.app.query.get_payment_use_case import GetPaymentUseCase
from drivent.service.ticketing.domain.entity.payment_entity import PaymentEntity
from drivent.service.ticketing.driving_adapter.http_controller.auth.session_auth import (
    get_current_user_id,
)
from drivent.service.ticketing.driving_adapter.http_controller.schema.payment_schema import (
    PaymentResponse,
    ProcessPaymentRequest,
)


router = APIRouter()


def _to_payment_response(payment: PaymentEntity) -> PaymentResponse:
    return PaymentResponse(
        id=payment.id or 0,
        ticket_id=payment.ticket_id,
        value=payment.value,
        card_issuer=payment.card_issuer,
        card_last_digits=payment.card_last_digits,
        created_at=payment.created_at,
        updated_at=payment.updated_at,
    )


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def get_payment(
    ticket_id: int = Query(alias='ticketId', ge=1),
    user_id: int = Depends(get_current_user_id),
    use_case: GetPaymentUseCase = Depends(GetPaymentUseCase.depends),
) -> PaymentResponse:
    payment = await use_case.get_by_ticket_id(user_id=user_id, ticket_id=ticket_id)
    return _to_payment_response(payment)


@router.post('/process', status_code=status.HTTP_200_OK)
@Logger.io
async def process_payment(
    request: ProcessPaymentRequest,
    user_id: int = Depends(get_current_user_id),
    use_case: ProcessPaymentUseCase = Depends(ProcessPaymentUseCase.depends),
) -> PaymentResponse:
    payment = await use_case.process(
        user_id=user_id,
        ticket_id=request.ticket_id,
        card_issuer=request.card_data.issuer,
        card_number=request.card_data.number,
    )
    return _to_payment_response(payment)
