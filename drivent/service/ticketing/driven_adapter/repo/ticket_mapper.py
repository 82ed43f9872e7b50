from drivent.service.shared_kernel.domain.enum.ticket_status import TicketStatus
from drivent.service.ticketing.domain.entity.ticket_entity import TicketEntity, TicketTypeEntity
from drivent.service.ticketing.driven_adapter.model.ticket_model import TicketModel, TicketTypeModel


def ticket_type_model_to_entity(ticket_type_model: TicketTypeModel) -> TicketTypeEntity:
    return TicketTypeEntity(
        id=ticket_type_model.id,
        name=ticket_type_model.name,
        price=ticket_type_model.price,
        is_remote=ticket_type_model.is_remote,
        includes_hotel=ticket_type_model.includes_hotel,
        created_at=ticket_type_model.created_at,
        updated_at=ticket_type_model.updated_at,
    )


def ticket_model_to_entity(ticket_model: TicketModel) -> TicketEntity:
    return TicketEntity(
        id=ticket_model.id,
        ticket_type_id=ticket_model.ticket_type_id,
        enrollment_id=ticket_model.enrollment_id,
        status=TicketStatus(ticket_model.status),
        ticket_type=ticket_type_model_to_entity(ticket_model.ticket_type),
        created_at=ticket_model.created_at,
        updated_at=ticket_model.updated_at,
    )
