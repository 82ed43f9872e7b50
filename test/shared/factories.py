"""
Row factories for integration tests.

Rows are written through the app's ORM models on a plain sqlite3 session.
sqlite keeps no timezone, so datetimes are stored as naive UTC.
"""

from datetime import datetime, timedelta, timezone

from sqlalchemy.orm import Session

from drivent.service.lodging.driven_adapter.model.booking_model import BookingModel
from drivent.service.lodging.driven_adapter.model.hotel_model import HotelModel, RoomModel
from drivent.service.shared_kernel.domain.enum.ticket_status import TicketStatus
from drivent.service.ticketing.driven_adapter.model.enrollment_model import (
    AddressModel,
    EnrollmentModel,
)
from drivent.service.ticketing.driven_adapter.model.event_model import EventModel
from drivent.service.ticketing.driven_adapter.model.payment_model import PaymentModel
from drivent.service.ticketing.driven_adapter.model.ticket_model import TicketModel, TicketTypeModel
from drivent.service.ticketing.driven_adapter.model.user_model import UserModel
from test.shared.constants import VALID_CEP, VALID_CPF, VALID_PHONE


def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _save(session: Session, model):
    session.add(model)
    session.commit()
    return model


def create_event(session: Session, *, starts_in: timedelta = timedelta(days=-1)) -> EventModel:
    starts_at = utc_now() + starts_in
    return _save(
        session,
        EventModel(
            title='Driven.t',
            background_image_url='linear-gradient(to right, #FA4098, #FFD77F)',
            logo_image_url='https://files.driveneducation.com.br/images/logo-rounded.png',
            starts_at=starts_at,
            ends_at=starts_at + timedelta(days=3),
        ),
    )


def create_user_row(session: Session, *, email: str = 'someone@drivent.com') -> UserModel:
    """A user that cannot sign in; enough to own rows."""
    return _save(session, UserModel(email=email, hashed_password='not-a-bcrypt-hash'))


def create_enrollment(session: Session, *, user_id: int) -> EnrollmentModel:
    enrollment = EnrollmentModel(
        name='Ada Lovelace',
        cpf=VALID_CPF,
        birthday=datetime(1990, 12, 10),
        phone=VALID_PHONE,
        user_id=user_id,
    )
    enrollment.address = AddressModel(
        cep=VALID_CEP,
        street='Rua Dona Margarida',
        city='Porto Alegre',
        state='RS',
        number='120',
        neighborhood='Azenha',
        address_detail=None,
    )
    return _save(session, enrollment)


def create_ticket_type(
    session: Session,
    *,
    is_remote: bool = False,
    includes_hotel: bool = True,
    price: int = 600,
    name: str = 'Presencial + Hotel',
) -> TicketTypeModel:
    return _save(
        session,
        TicketTypeModel(
            name=name, price=price, is_remote=is_remote, includes_hotel=includes_hotel
        ),
    )


def create_ticket(
    session: Session,
    *,
    enrollment_id: int,
    ticket_type_id: int,
    status: TicketStatus = TicketStatus.RESERVED,
) -> TicketModel:
    return _save(
        session,
        TicketModel(
            enrollment_id=enrollment_id, ticket_type_id=ticket_type_id, status=status.value
        ),
    )


def create_payment(session: Session, *, ticket_id: int, value: int = 600) -> PaymentModel:
    return _save(
        session,
        PaymentModel(
            ticket_id=ticket_id, value=value, card_issuer='VISA', card_last_digits='1111'
        ),
    )


def create_hotel(session: Session, *, name: str = 'Driven Resort') -> HotelModel:
    return _save(session, HotelModel(name=name, image='https://example.com/hotel.png'))


def create_room(session: Session, *, hotel_id: int, capacity: int = 3, name: str = '101') -> RoomModel:
    return _save(session, RoomModel(name=name, capacity=capacity, hotel_id=hotel_id))


def create_booking(session: Session, *, user_id: int, room_id: int) -> BookingModel:
    return _save(session, BookingModel(user_id=user_id, room_id=room_id))


def create_lodging_ticket(
    session: Session, *, user_id: int, status: TicketStatus = TicketStatus.PAID
) -> TicketModel:
    """Enrollment plus a ticket whose type includes a hotel stay."""
    enrollment = create_enrollment(session, user_id=user_id)
    ticket_type = create_ticket_type(session, is_remote=False, includes_hotel=True)
    return create_ticket(
        session, enrollment_id=enrollment.id, ticket_type_id=ticket_type.id, status=status
    )
