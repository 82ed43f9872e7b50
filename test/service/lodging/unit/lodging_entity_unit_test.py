import pytest

from drivent.platform.exception.exceptions import ForbiddenError
from drivent.service.lodging.domain.entity.booking_entity import BookingEntity
from drivent.service.lodging.domain.entity.hotel_entity import RoomEntity


@pytest.mark.unit
class TestRoomVacancy:
    @pytest.mark.parametrize(
        'capacity,booking_count,expected',
        [(1, 0, True), (3, 2, True), (3, 3, False), (2, 5, False)],
    )
    def test_has_vacancy(self, capacity: int, booking_count: int, expected: bool):
        room = RoomEntity(name='101', capacity=capacity, hotel_id=1, id=1)

        assert room.has_vacancy(booking_count=booking_count) is expected

    def test_full_room_raises_forbidden(self):
        room = RoomEntity(name='101', capacity=1, hotel_id=1, id=1)

        with pytest.raises(ForbiddenError) as exc_info:
            room.validate_vacancy(booking_count=1)

        assert exc_info.value.status_code == 403


@pytest.mark.unit
class TestBookingEntity:
    def test_create_takes_room_id(self):
        room = RoomEntity(name='101', capacity=1, hotel_id=1, id=4)

        booking = BookingEntity.create(user_id=7, room=room)

        assert booking.room_id == 4
        assert booking.room is room
        assert booking.id is None

    def test_move_to_switches_room(self):
        booking = BookingEntity(user_id=7, room_id=1, id=21)
        target = RoomEntity(name='102', capacity=2, hotel_id=1, id=2)

        booking.move_to(target)

        assert booking.room_id == 2
        assert booking.room is target

    def test_validate_owner(self):
        booking = BookingEntity(user_id=7, room_id=1, id=21)

        booking.validate_owner(user_id=7)
        with pytest.raises(ForbiddenError):
            booking.validate_owner(user_id=8)
