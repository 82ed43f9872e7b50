from datetime import datetime
from typing import List, Optional

import attrs

from drivent.platform.exception.exceptions import ForbiddenError


@attrs.define
class RoomEntity:
    name: str
    capacity: int
    hotel_id: int
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def has_vacancy(self, *, booking_count: int) -> bool:
        return booking_count < self.capacity

    def validate_vacancy(self, *, booking_count: int) -> None:
        if not self.has_vacancy(booking_count=booking_count):
            raise ForbiddenError('Room is already full')


@attrs.define
class HotelEntity:
    name: str
    image: str
    rooms: List[RoomEntity] = attrs.field(factory=list)
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
