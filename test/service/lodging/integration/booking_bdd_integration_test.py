from typing import Any

from fastapi.testclient import TestClient
import httpx
import pytest
from pytest_bdd import given, parsers, scenarios, then, when
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from drivent.platform.constant.route_constant import BOOKING_BASE
from drivent.service.lodging.driven_adapter.model.booking_model import BookingModel
from drivent.service.shared_kernel.domain.enum.ticket_status import TicketStatus
from test.shared.constants import TEST_EMAIL
from test.shared.factories import (
    create_booking,
    create_hotel,
    create_lodging_ticket,
    create_room,
    create_user_row,
)
from test.shared.utils import assert_response_status, create_signed_in_user


pytestmark = pytest.mark.integration

scenarios('booking.feature')


TICKET_STATUSES = {'paid': TicketStatus.PAID, 'reserved': TicketStatus.RESERVED}


@pytest.fixture
def booking_state() -> dict[str, Any]:
    return {'rooms': {}, 'hotel_id': None, 'headers': None, 'booking_id': None}


# =============================================================================
# Given
# =============================================================================
@given(parsers.parse('a hotel with a room "{name}" of capacity {capacity:d}'))
def hotel_with_room(
    db_session: Session, booking_state: dict[str, Any], name: str, capacity: int
) -> None:
    hotel = create_hotel(db_session)
    booking_state['hotel_id'] = hotel.id
    booking_state['rooms'][name] = create_room(
        db_session, hotel_id=hotel.id, name=name, capacity=capacity
    )


@given(parsers.parse('a room "{name}" of capacity {capacity:d} in the same hotel'))
def room_in_same_hotel(
    db_session: Session, booking_state: dict[str, Any], name: str, capacity: int
) -> None:
    booking_state['rooms'][name] = create_room(
        db_session, hotel_id=booking_state['hotel_id'], name=name, capacity=capacity
    )


@given(parsers.parse('room "{name}" is taken by another attendee'))
def room_taken(db_session: Session, booking_state: dict[str, Any], name: str) -> None:
    guest = create_user_row(db_session, email='guest@drivent.com')
    create_booking(db_session, user_id=guest.id, room_id=booking_state['rooms'][name].id)


@given(parsers.parse('I am signed in with a {status} ticket that includes a hotel'))
def signed_in_with_ticket(
    client: TestClient, db_session: Session, booking_state: dict[str, Any], status: str
) -> None:
    user_id, headers = create_signed_in_user(client, TEST_EMAIL)
    create_lodging_ticket(db_session, user_id=user_id, status=TICKET_STATUSES[status])
    booking_state['headers'] = headers


@given(parsers.parse('I have booked room "{name}"'))
def booked_room(client: TestClient, booking_state: dict[str, Any], name: str) -> None:
    response = client.post(
        BOOKING_BASE,
        json={'roomId': booking_state['rooms'][name].id},
        headers=booking_state['headers'],
    )
    assert_response_status(response, 200)
    booking_state['booking_id'] = response.json()['bookingId']


# =============================================================================
# When
# =============================================================================
@when(parsers.parse('I book room "{name}"'), target_fixture='response')
def book_room(client: TestClient, booking_state: dict[str, Any], name: str) -> httpx.Response:
    return client.post(
        BOOKING_BASE,
        json={'roomId': booking_state['rooms'][name].id},
        headers=booking_state['headers'],
    )


@when(parsers.parse('I move my booking to room "{name}"'), target_fixture='response')
def move_booking(client: TestClient, booking_state: dict[str, Any], name: str) -> httpx.Response:
    return client.put(
        f'{BOOKING_BASE}/{booking_state["booking_id"]}',
        json={'roomId': booking_state['rooms'][name].id},
        headers=booking_state['headers'],
    )


@when('I cancel my booking', target_fixture='response')
def cancel_booking(client: TestClient, booking_state: dict[str, Any]) -> httpx.Response:
    return client.delete(
        f'{BOOKING_BASE}/{booking_state["booking_id"]}', headers=booking_state['headers']
    )


# =============================================================================
# Then
# =============================================================================
@then(parsers.parse('the response status code should be {status_code:d}'))
def response_status(response: httpx.Response, status_code: int) -> None:
    assert_response_status(response, status_code)


@then(parsers.parse('my booking is in room "{name}"'))
def booking_in_room(client: TestClient, booking_state: dict[str, Any], name: str) -> None:
    response = client.get(BOOKING_BASE, headers=booking_state['headers'])
    assert_response_status(response, 200)
    assert response.json()['Room']['id'] == booking_state['rooms'][name].id


@then(parsers.parse('room "{name}" has {count:d} bookings'))
def room_booking_count(
    db_session: Session, booking_state: dict[str, Any], name: str, count: int
) -> None:
    db_session.expire_all()
    stored = db_session.execute(
        select(func.count(BookingModel.id)).where(
            BookingModel.room_id == booking_state['rooms'][name].id
        )
    ).scalar_one()
    assert stored == count


@then('I have no booking')
def no_booking(client: TestClient, booking_state: dict[str, Any]) -> None:
    response = client.get(BOOKING_BASE, headers=booking_state['headers'])
    assert_response_status(response, 404)
