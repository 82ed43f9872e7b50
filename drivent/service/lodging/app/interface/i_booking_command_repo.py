from abc import ABC, abstractmethod

from drivent.service.lodging.domain.entity.booking_entity import BookingEntity


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def create(self, booking: BookingEntity) -> BookingEntity:
        pass

    @abstractmethod
    async def update_room(self, *, booking_id: int, room_id: int) -> BookingEntity:
        pass

    @abstractmethod
    async def delete(self, *, booking_id: int) -> None:
        pass
