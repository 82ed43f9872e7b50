from fastapi import APIRouter, Depends, status

from drivent.platform.logging.loguru_io import Logger
from drivent.service.ticketing.app.query.get_event_use_case import GetEventUseCase
from drivent.service.ticketing.driving_adapter.http_controller.schema.event_schema import (
    EventResponse,
)


router = APIRouter()


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def get_default_event(
    use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
) -> EventResponse:
    event = await use_case.get_first()
    return EventResponse(
        id=event.id or 0,
        title=event.title,
        background_image_url=event.background_image_url,
        logo_image_url=event.logo_image_url,
        starts_at=event.starts_at,
        ends_at=event.ends_at,
    )
