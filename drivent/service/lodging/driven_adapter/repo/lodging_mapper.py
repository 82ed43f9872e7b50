from drivent.service.lodging.domain.entity.booking_entity import BookingEntity
from drivent.service.lodging.domain.entity.hotel_entity import HotelEntity, RoomEntity
from drivent.service.lodging.driven_adapter.model.booking_model import BookingModel
from drivent.service.lodging.driven_adapter.model.hotel_model import HotelModel, RoomModel


def room_model_to_entity(room_model: RoomModel) -> RoomEntity:
    return RoomEntity(
        id=room_model.id,
        name=room_model.name,
        capacity=room_model.capacity,
        hotel_id=room_model.hotel_id,
        created_at=room_model.created_at,
        updated_at=room_model.updated_at,
    )


def hotel_model_to_entity(hotel_model: HotelModel, *, with_rooms: bool = False) -> HotelEntity:
    return HotelEntity(
        id=hotel_model.id,
        name=hotel_model.name,
        image=hotel_model.image,
        rooms=[room_model_to_entity(room) for room in hotel_model.rooms] if with_rooms else [],
        created_at=hotel_model.created_at,
        updated_at=hotel_model.updated_at,
    )


def booking_model_to_entity(booking_model: BookingModel, *, with_room: bool = True) -> BookingEntity:
    return BookingEntity(
        id=booking_model.id,
        user_id=booking_model.user_id,
        room_id=booking_model.room_id,
        room=room_model_to_entity(booking_model.room) if with_room else None,
        created_at=booking_model.created_at,
        updated_at=booking_model.updated_at,
    )
