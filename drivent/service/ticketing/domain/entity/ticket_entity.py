from datetime import datetime
from typing import Optional

import attrs

from drivent.service.shared_kernel.domain.enum.ticket_status import TicketStatus


@attrs.define
class TicketTypeEntity:
    name: str
    price: int
    is_remote: bool
    includes_hotel: bool
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@attrs.define
class TicketEntity:
    ticket_type_id: int
    enrollment_id: int
    status: TicketStatus = TicketStatus.RESERVED
    ticket_type: Optional[TicketTypeEntity] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def reserve(cls, *, enrollment_id: int, ticket_type: TicketTypeEntity) -> 'TicketEntity':
        return cls(
            ticket_type_id=ticket_type.id or 0,
            enrollment_id=enrollment_id,
            status=TicketStatus.RESERVED,
            ticket_type=ticket_type,
        )

    @property
    def is_paid(self) -> bool:
        return self.status == TicketStatus.PAID

    @property
    def grants_lodging(self) -> bool:
        """Paid, in-person ticket whose type includes a hotel stay."""
        return (
            self.is_paid
            and self.ticket_type is not None
            and not self.ticket_type.is_remote
            and self.ticket_type.includes_hotel
        )
