from datetime import datetime
from typing import Optional

import attrs

from drivent.platform.exception.exceptions import ForbiddenError
from drivent.service.lodging.domain.entity.hotel_entity import RoomEntity


@attrs.define
class BookingEntity:
    user_id: int
    room_id: int
    room: Optional[RoomEntity] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(cls, *, user_id: int, room: RoomEntity) -> 'BookingEntity':
        return cls(user_id=user_id, room_id=room.id or 0, room=room)

    def validate_owner(self, *, user_id: int) -> None:
        if self.user_id != user_id:
            raise ForbiddenError('Booking belongs to another user')

    def move_to(self, room: RoomEntity) -> None:
        self.room_id = room.id or 0
        self.room = room
