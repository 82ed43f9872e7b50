"""
Model registry

Importing this module registers every ORM table on Base.metadata, which
create_db_and_tables() and alembic autogenerate both read.
"""

from drivent.platform.database.orm_db_setting import Base
from drivent.service.lodging.driven_adapter.model.booking_model import BookingModel
from drivent.service.lodging.driven_adapter.model.hotel_model import HotelModel, RoomModel
from drivent.service.ticketing.driven_adapter.model.enrollment_model import (
    AddressModel,
    EnrollmentModel,
)
from drivent.service.ticketing.driven_adapter.model.event_model import EventModel
from drivent.service.ticketing.driven_adapter.model.payment_model import PaymentModel
from drivent.service.ticketing.driven_adapter.model.session_model import SessionModel
from drivent.service.ticketing.driven_adapter.model.ticket_model import TicketModel, TicketTypeModel
from drivent.service.ticketing.driven_adapter.model.user_model import UserModel


__all__ = [
    'Base',
    'UserModel',
    'SessionModel',
    'EventModel',
    'EnrollmentModel',
    'AddressModel',
    'TicketTypeModel',
    'TicketModel',
    'PaymentModel',
    'HotelModel',
    'RoomModel',
    'BookingModel',
]
