from datetime import datetime
from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from drivent.platform.config.di import Container
from drivent.platform.exception.exceptions import DomainError
from drivent.platform.logging.loguru_io import Logger
from drivent.platform.metrics.drivent_metrics import metrics
from drivent.service.ticketing.app.interface.i_cep_lookup_client import ICepLookupClient
from drivent.service.ticketing.app.interface.i_enrollment_command_repo import (
    IEnrollmentCommandRepo,
)
from drivent.service.ticketing.app.interface.i_enrollment_query_repo import (
    IEnrollmentQueryRepo,
)
from drivent.service.ticketing.domain.entity.enrollment_entity import (
    AddressEntity,
    EnrollmentEntity,
)


class UpsertEnrollmentUseCase:
    def __init__(
        self,
        *,
        enrollment_command_repo: IEnrollmentCommandRepo,
        enrollment_query_repo: IEnrollmentQueryRepo,
        cep_lookup_client: ICepLookupClient,
    ) -> None:
        self.enrollment_command_repo = enrollment_command_repo
        self.enrollment_query_repo = enrollment_query_repo
        self.cep_lookup_client = cep_lookup_client

    @classmethod
    @inject
    def depends(
        cls,
        enrollment_command_repo: IEnrollmentCommandRepo = Depends(
            Provide[Container.enrollment_command_repo]
        ),
        enrollment_query_repo: IEnrollmentQueryRepo = Depends(
            Provide[Container.enrollment_query_repo]
        ),
        cep_lookup_client: ICepLookupClient = Depends(Provide[Container.via_cep_client]),
    ) -> Self:
        return cls(
            enrollment_command_repo=enrollment_command_repo,
            enrollment_query_repo=enrollment_query_repo,
            cep_lookup_client=cep_lookup_client,
        )

    @Logger.io
    async def upsert(
        self,
        *,
        user_id: int,
        name: str,
        cpf: str,
        birthday: datetime,
        phone: str,
        address: AddressEntity,
    ) -> EnrollmentEntity:
        """
        Create or replace the user's enrollment and its single address.

        Raises:
            DomainError: invalid name, CPF or state, or a CEP unknown to the lookup service
        """
        enrollment = EnrollmentEntity.create(
            user_id=user_id,
            name=name,
            cpf=cpf,
            birthday=birthday,
            phone=phone,
            address=address,
        )

        if await self.cep_lookup_client.get_address(cep=address.cep) is None:
            raise DomainError('Invalid CEP')

        existing = await self.enrollment_query_repo.get_with_address_by_user_id(user_id=user_id)
        saved = await self.enrollment_command_repo.upsert_with_address(enrollment)

        metrics.enrollments_upserted.labels(operation='update' if existing else 'create').inc()
        return saved
