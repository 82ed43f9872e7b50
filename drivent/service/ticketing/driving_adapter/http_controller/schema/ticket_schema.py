from datetime import datetime

from pydantic import Field

from drivent.service.shared_kernel.driving_adapter.schema.camel_schema import CamelModel


class CreateTicketRequest(CamelModel):
    ticket_type_id: int = Field(ge=1)


class TicketTypeResponse(CamelModel):
    id: int
    name: str
    price: int
    is_remote: bool
    includes_hotel: bool
    created_at: datetime
    updated_at: datetime


class TicketResponse(CamelModel):
    id: int
    status: str
    ticket_type_id: int
    enrollment_id: int
    ticket_type: TicketTypeResponse = Field(alias='TicketType')
    created_at: datetime
    updated_at: datetime
