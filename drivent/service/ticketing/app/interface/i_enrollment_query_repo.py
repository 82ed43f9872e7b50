from abc import ABC, abstractmethod
from typing import Optional

from drivent.service.ticketing.domain.entity.enrollment_entity import EnrollmentEntity


class IEnrollmentQueryRepo(ABC):
    @abstractmethod
    async def get_with_address_by_user_id(self, *, user_id: int) -> Optional[EnrollmentEntity]:
        pass
