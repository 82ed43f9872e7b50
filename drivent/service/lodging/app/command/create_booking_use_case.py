from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from drivent.platform.config.di import Container
from drivent.platform.exception.exceptions import CustomBaseError, ForbiddenError
from drivent.platform.logging.loguru_io import Logger
from drivent.platform.metrics.drivent_metrics import metrics
from drivent.service.lodging.app.command.room_vacancy_check import ensure_room_vacancy
from drivent.service.lodging.app.interface.i_booking_command_repo import IBookingCommandRepo
from drivent.service.lodging.app.interface.i_booking_query_repo import IBookingQueryRepo
from drivent.service.lodging.app.interface.i_hotel_query_repo import IHotelQueryRepo
from drivent.service.lodging.app.query.lodging_ticket_lookup import find_user_ticket
from drivent.service.lodging.domain.entity.booking_entity import BookingEntity
from drivent.service.ticketing.app.interface.i_enrollment_query_repo import (
    IEnrollmentQueryRepo,
)
from drivent.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo


class CreateBookingUseCase:
    """
    Book a room for the signed-in user

    Flow:
    1. Ticket check: enrollment + ticket that is paid, in person and includes a hotel
    2. Room check: room exists and has a free slot
    3. One booking per user
    4. Insert

    Every rejection is a 403 except a missing room (404).
    """

    def __init__(
        self,
        *,
        booking_command_repo: IBookingCommandRepo,
        booking_query_repo: IBookingQueryRepo,
        hotel_query_repo: IHotelQueryRepo,
        enrollment_query_repo: IEnrollmentQueryRepo,
        ticket_query_repo: ITicketQueryRepo,
    ) -> None:
        self.booking_command_repo = booking_command_repo
        self.booking_query_repo = booking_query_repo
        self.hotel_query_repo = hotel_query_repo
        self.enrollment_query_repo = enrollment_query_repo
        self.ticket_query_repo = ticket_query_repo
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        booking_command_repo: IBookingCommandRepo = Depends(
            Provide[Container.booking_command_repo]
        ),
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
        hotel_query_repo: IHotelQueryRepo = Depends(Provide[Container.hotel_query_repo]),
        enrollment_query_repo: IEnrollmentQueryRepo = Depends(
            Provide[Container.enrollment_query_repo]
        ),
        ticket_query_repo: ITicketQueryRepo = Depends(Provide[Container.ticket_query_repo]),
    ) -> Self:
        return cls(
            booking_command_repo=booking_command_repo,
            booking_query_repo=booking_query_repo,
            hotel_query_repo=hotel_query_repo,
            enrollment_query_repo=enrollment_query_repo,
            ticket_query_repo=ticket_query_repo,
        )

    @Logger.io
    async def create_booking(self, *, user_id: int, room_id: int) -> BookingEntity:
        with self.tracer.start_as_current_span(
            'use_case.create_booking',
            attributes={'user.id': user_id, 'room.id': room_id},
        ):
            try:
                booking = await self._create_booking(user_id=user_id, room_id=room_id)
            except CustomBaseError:
                metrics.record_booking(operation='create', result='rejected')
                raise

        metrics.record_booking(operation='create', result='success')
        Logger.base.info(f'🏨 [BOOKING] User {user_id} booked room {room_id}')
        return booking

    async def _create_booking(self, *, user_id: int, room_id: int) -> BookingEntity:
        ticket = await find_user_ticket(
            user_id=user_id,
            enrollment_query_repo=self.enrollment_query_repo,
            ticket_query_repo=self.ticket_query_repo,
        )
        if ticket is None:
            raise ForbiddenError('You need an enrollment and a ticket to book a room')
        if not ticket.grants_lodging:
            raise ForbiddenError('Ticket must be paid, in person and include a hotel')

        room = await ensure_room_vacancy(
            room_id=room_id,
            hotel_query_repo=self.hotel_query_repo,
            booking_query_repo=self.booking_query_repo,
        )

        if await self.booking_query_repo.get_by_user_id(user_id=user_id):
            raise ForbiddenError('You already have a booking')

        return await self.booking_command_repo.create(
            BookingEntity.create(user_id=user_id, room=room)
        )
