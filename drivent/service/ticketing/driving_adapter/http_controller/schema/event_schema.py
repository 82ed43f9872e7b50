from datetime import datetime

from drivent.service.shared_kernel.driving_adapter.schema.camel_schema import CamelModel


class EventResponse(CamelModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'id': 1,
                'title': 'Driven.t',
                'backgroundImageUrl': 'linear-gradient(to right, #FA4098, #FFD77F)',
                'logoImageUrl': 'https://files.driveneducation.com.br/images/logo-rounded.png',
                'startsAt': '2026-11-01T12:00:00Z',
                'endsAt': '2026-11-04T18:00:00Z',
            }
        }
    }

    id: int
    title: str
    background_image_url: str
    logo_image_url: str
    starts_at: datetime
    ends_at: datetime
