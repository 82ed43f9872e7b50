from abc import ABC, abstractmethod
from typing import List, Optional

from drivent.service.lodging.domain.entity.hotel_entity import HotelEntity, RoomEntity


class IHotelQueryRepo(ABC):
    @abstractmethod
    async def list_hotels(self) -> List[HotelEntity]:
        """Hotels without their rooms."""
        pass

    @abstractmethod
    async def get_with_rooms(self, *, hotel_id: int) -> Optional[HotelEntity]:
        pass

    @abstractmethod
    async def get_room_by_id(self, *, room_id: int) -> Optional[RoomEntity]:
        pass
