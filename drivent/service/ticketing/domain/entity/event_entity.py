from datetime import datetime, timezone
from typing import Optional

import attrs

from drivent.platform.exception.exceptions import DomainError


def _as_utc(moment: datetime) -> datetime:
    # sqlite hands back naive datetimes; they are stored as UTC
    return moment if moment.tzinfo else moment.replace(tzinfo=timezone.utc)


@attrs.define
class EventEntity:
    title: str
    background_image_url: str
    logo_image_url: str
    starts_at: datetime
    ends_at: datetime
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def has_started(self, *, now: Optional[datetime] = None) -> bool:
        now = now or datetime.now(timezone.utc)
        return _as_utc(self.starts_at) <= _as_utc(now)

    def validate_enrollment_open(self, *, now: Optional[datetime] = None) -> None:
        if not self.has_started(now=now):
            raise DomainError('Cannot enroll before event start date!')
