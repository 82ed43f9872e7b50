from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from drivent.platform.config.di import Container
from drivent.platform.logging.loguru_io import Logger
from drivent.service.ticketing.app.interface.i_enrollment_query_repo import (
    IEnrollmentQueryRepo,
)
from drivent.service.ticketing.domain.entity.enrollment_entity import EnrollmentEntity


class GetEnrollmentUseCase:
    def __init__(self, enrollment_query_repo: IEnrollmentQueryRepo) -> None:
        self.enrollment_query_repo = enrollment_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        enrollment_query_repo: IEnrollmentQueryRepo = Depends(
            Provide[Container.enrollment_query_repo]
        ),
    ) -> Self:
        return cls(enrollment_query_repo=enrollment_query_repo)

    @Logger.io
    async def get_by_user_id(self, *, user_id: int) -> Optional[EnrollmentEntity]:
        return await self.enrollment_query_repo.get_with_address_by_user_id(user_id=user_id)
