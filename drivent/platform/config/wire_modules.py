"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from drivent.service.lodging.app.command import (
    cancel_booking_use_case,
    change_booking_room_use_case,
    create_booking_use_case,
)
from drivent.service.lodging.app.query import get_booking_use_case, list_hotels_use_case
from drivent.service.ticketing.app.command import (
    create_ticket_use_case,
    create_user_use_case,
    process_payment_use_case,
    sign_in_use_case,
    upsert_enrollment_use_case,
)
from drivent.service.ticketing.app.query import (
    get_address_from_cep_use_case,
    get_enrollment_use_case,
    get_event_use_case,
    get_payment_use_case,
    get_ticket_use_case,
    list_ticket_types_use_case,
)
from drivent.service.ticketing.driving_adapter.http_controller.auth import session_auth


WIRE_MODULES: list[ModuleType] = [
    # Ticketing
    create_user_use_case,
    sign_in_use_case,
    upsert_enrollment_use_case,
    create_ticket_use_case,
    process_payment_use_case,
    get_event_use_case,
    get_enrollment_use_case,
    get_address_from_cep_use_case,
    list_ticket_types_use_case,
    get_ticket_use_case,
    get_payment_use_case,
    session_auth,
    # Lodging
    list_hotels_use_case,
    get_booking_use_case,
    create_booking_use_case,
    change_booking_room_use_case,
    cancel_booking_use_case,
]
