from abc import ABC, abstractmethod

from drivent.service.ticketing.domain.entity.enrollment_entity import EnrollmentEntity


class IEnrollmentCommandRepo(ABC):
    @abstractmethod
    async def upsert_with_address(self, enrollment: EnrollmentEntity) -> EnrollmentEntity:
        """Create or replace the user's enrollment and its single address."""
        pass
