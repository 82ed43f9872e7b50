from typing import List

from fastapi import APIRouter, Depends, status

from drivent.platform.logging.loguru_io import Logger
from drivent.service.ticketing.app.command.create_ticket_use_case import CreateTicketUseCase
from drivent.service.ticketing.app.query.get_ticket_use_case import GetTicketUseCase
from drivent.service.ticketing.app.query.list_ticket_types_use_case import (
    ListTicketTypesUseCase,
)
from drivent.service.ticketing.domain.entity.ticket_entity import TicketEntity, TicketTypeEntity
from drivent.service.ticketing.driving_adapter.http_controller.auth.session_auth import (
    get_current_user_id,
)
from drivent.service.ticketing.driving_adapter.http_controller.schema.ticket_schema import (
    CreateTicketRequest,
    TicketResponse,
    TicketTypeResponse,
)


router = APIRouter()


def _to_ticket_type_response(ticket_type: TicketTypeEntity) -> TicketTypeResponse:
    return TicketTypeResponse(
        id=ticket_type.id or 0,
        name=ticket_type.name,
        price=ticket_type.price,
        is_remote=ticket_type.is_remote,
        includes_hotel=ticket_type.includes_hotel,
        created_at=ticket_type.created_at,
        updated_at=ticket_type.updated_at,
    )


def _to_ticket_response(ticket: TicketEntity) -> TicketResponse:
    if ticket.ticket_type is None:
        raise ValueError('Ticket type should be loaded with the ticket.')

    return TicketResponse(
        id=ticket.id or 0,
        status=ticket.status.value,
        ticket_type_id=ticket.ticket_type_id,
        enrollment_id=ticket.enrollment_id,
        ticket_type=_to_ticket_type_response(ticket.ticket_type),
        created_at=ticket.created_at,
        updated_at=ticket.updated_at,
    )


@router.get('/types', status_code=status.HTTP_200_OK)
@Logger.io
async def list_ticket_types(
    user_id: int = Depends(get_current_user_id),
    use_case: ListTicketTypesUseCase = Depends(ListTicketTypesUseCase.depends),
) -> List[TicketTypeResponse]:
    ticket_types = await use_case.list_ticket_types()
    return [_to_ticket_type_response(ticket_type) for ticket_type in ticket_types]


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def get_ticket(
    user_id: int = Depends(get_current_user_id),
    use_case: GetTicketUseCase = Depends(GetTicketUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.get_by_user_id(user_id=user_id)
    return _to_ticket_response(ticket)


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_ticket(
    request: CreateTicketRequest,
    user_id: int = Depends(get_current_user_id),
    use_case: CreateTicketUseCase = Depends(CreateTicketUseCase.depends),
) -> TicketResponse:
    ticket = await use_case.reserve(user_id=user_id, ticket_type_id=request.ticket_type_id)
    return _to_ticket_response(ticket)
