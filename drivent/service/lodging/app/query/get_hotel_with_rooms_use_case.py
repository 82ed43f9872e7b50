from drivent.platform.exception.exceptions import NotFoundError
from drivent.platform.logging.loguru_io import Logger
from drivent.service.lodging.app.query.list_hotels_use_case import ListHotelsUseCase
from drivent.service.lodging.domain.entity.hotel_entity import HotelEntity


class GetHotelWithRoomsUseCase(ListHotelsUseCase):
    """Same eligibility rules and dependencies as listing hotels."""

    @Logger.io
    async def get_hotel(self, *, user_id: int, hotel_id: int) -> HotelEntity:
        await self.validate_lodging_access(user_id=user_id)

        hotel = await self.hotel_query_repo.get_with_rooms(hotel_id=hotel_id)
        if hotel is None:
            raise NotFoundError()
        return hotel
