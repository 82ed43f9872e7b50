from abc import ABC, abstractmethod
from typing import Optional

from drivent.service.lodging.domain.entity.booking_entity import BookingEntity


class IBookingQueryRepo(ABC):
    @abstractmethod
    async def get_by_user_id(self, *, user_id: int) -> Optional[BookingEntity]:
        """The user's booking with its Room loaded."""
        pass

    @abstractmethod
    async def get_by_id(self, *, booking_id: int) -> Optional[BookingEntity]:
        pass

    @abstractmethod
    async def count_by_room_id(self, *, room_id: int) -> int:
        pass
