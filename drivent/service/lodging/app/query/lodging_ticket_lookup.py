from typing import Optional

from drivent.service.ticketing.app.interface.i_enrollment_query_repo import (
    IEnrollmentQueryRepo,
)
from drivent.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo
from drivent.service.ticketing.domain.entity.ticket_entity import TicketEntity


async def find_user_ticket(
    *,
    user_id: int,
    enrollment_query_repo: IEnrollmentQueryRepo,
    ticket_query_repo: ITicketQueryRepo,
) -> Optional[TicketEntity]:
    """The user's ticket, or None when the user has no enrollment or no ticket yet."""
    enrollment = await enrollment_query_repo.get_with_address_by_user_id(user_id=user_id)
    if enrollment is None or enrollment.id is None:
        return None
    return await ticket_query_repo.get_by_enrollment_id(enrollment_id=enrollment.id)
