from typing import AsyncContextManager, Callable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from drivent.platform.exception.exceptions import ConflictError
from drivent.platform.logging.loguru_io import Logger
from drivent.service.ticketing.app.interface.i_user_command_repo import IUserCommandRepo
from drivent.service.ticketing.domain.entity.user_entity import UserEntity
from drivent.service.ticketing.driven_adapter.model.user_model import UserModel


class UserCommandRepoImpl(IUserCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, user_entity: UserEntity) -> UserEntity:
        async with self.session_factory() as session:
            user_model = UserModel(
                email=user_entity.email,
                hashed_password=user_entity.hashed_password,
            )

            session.add(user_model)
            try:
                await session.commit()
            except IntegrityError as e:
                # Lost a race against another sign-up with the same email
                raise ConflictError('There is already an user with given email') from e
            await session.refresh(user_model)

            return UserEntity(
                id=user_model.id,
                email=user_model.email,
                created_at=user_model.created_at,
                updated_at=user_model.updated_at,
            )
