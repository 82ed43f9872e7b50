from typing import AsyncContextManager, Callable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from drivent.platform.logging.loguru_io import Logger
from drivent.service.ticketing.app.interface.i_enrollment_command_repo import (
    IEnrollmentCommandRepo,
)
from drivent.service.ticketing.domain.entity.enrollment_entity import (
    AddressEntity,
    EnrollmentEntity,
)
from drivent.service.ticketing.driven_adapter.model.enrollment_model import (
    AddressModel,
    EnrollmentModel,
)
from drivent.service.ticketing.driven_adapter.repo.enrollment_query_repo_impl import (
    enrollment_model_to_entity,
)


class EnrollmentCommandRepoImpl(IEnrollmentCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def upsert_with_address(self, enrollment: EnrollmentEntity) -> EnrollmentEntity:
        async with self.session_factory() as session:
            result = await session.execute(
                select(EnrollmentModel)
                .options(selectinload(EnrollmentModel.address))
                .where(EnrollmentModel.user_id == enrollment.user_id)
            )
            enrollment_model = result.scalar_one_or_none()

            if enrollment_model is None:
                enrollment_model = EnrollmentModel(user_id=enrollment.user_id)
                session.add(enrollment_model)

            enrollment_model.name = enrollment.name
            enrollment_model.cpf = enrollment.cpf
            enrollment_model.birthday = enrollment.birthday
            enrollment_model.phone = enrollment.phone

            if enrollment.address is not None:
                if enrollment_model.address is None:
                    enrollment_model.address = AddressModel()
                self._apply_address(enrollment_model.address, enrollment.address)

            await session.commit()
            enrollment_id = enrollment_model.id

        async with self.session_factory() as session:
            result = await session.execute(
                select(EnrollmentModel)
                .options(selectinload(EnrollmentModel.address))
                .where(EnrollmentModel.id == enrollment_id)
            )
            return enrollment_model_to_entity(result.scalar_one())

    @staticmethod
    def _apply_address(address_model: AddressModel, address: AddressEntity) -> None:
        address_model.cep = address.cep
        address_model.street = address.street
        address_model.city = address.city
        address_model.state = address.state
        address_model.number = address.number
        address_model.neighborhood = address.neighborhood
        address_model.address_detail = address.address_detail
