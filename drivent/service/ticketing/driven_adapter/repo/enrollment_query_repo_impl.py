from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from drivent.platform.logging.loguru_io import Logger
from drivent.service.ticketing.app.interface.i_enrollment_query_repo import IEnrollmentQueryRepo
from drivent.service.ticketing.domain.entity.enrollment_entity import (
    AddressEntity,
    EnrollmentEntity,
)
from drivent.service.ticketing.driven_adapter.model.enrollment_model import EnrollmentModel


def enrollment_model_to_entity(enrollment_model: EnrollmentModel) -> EnrollmentEntity:
    address_model = enrollment_model.address
    address = (
        AddressEntity(
            id=address_model.id,
            cep=address_model.cep,
            street=address_model.street,
            city=address_model.city,
            state=address_model.state,
            number=address_model.number,
            neighborhood=address_model.neighborhood,
            address_detail=address_model.address_detail,
            enrollment_id=address_model.enrollment_id,
            created_at=address_model.created_at,
            updated_at=address_model.updated_at,
        )
        if address_model
        else None
    )
    return EnrollmentEntity(
        id=enrollment_model.id,
        name=enrollment_model.name,
        cpf=enrollment_model.cpf,
        birthday=enrollment_model.birthday,
        phone=enrollment_model.phone,
        user_id=enrollment_model.user_id,
        address=address,
        created_at=enrollment_model.created_at,
        updated_at=enrollment_model.updated_at,
    )


class EnrollmentQueryRepoImpl(IEnrollmentQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_with_address_by_user_id(self, *, user_id: int) -> Optional[EnrollmentEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(EnrollmentModel)
                .options(selectinload(EnrollmentModel.address))
                .where(EnrollmentModel.user_id == user_id)
            )
            enrollment_model = result.scalar_one_or_none()
            return enrollment_model_to_entity(enrollment_model) if enrollment_model else None
