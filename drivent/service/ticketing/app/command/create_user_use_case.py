from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from drivent.platform.config.di import Container
from drivent.platform.exception.exceptions import ConflictError
from drivent.platform.logging.loguru_io import Logger
from drivent.platform.metrics.drivent_metrics import metrics
from drivent.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from drivent.service.ticketing.app.interface.i_password_hasher import IPasswordHasher
from drivent.service.ticketing.app.interface.i_user_command_repo import IUserCommandRepo
from drivent.service.ticketing.app.interface.i_user_query_repo import IUserQueryRepo
from drivent.service.ticketing.domain.entity.user_entity import UserEntity


DUPLICATED_EMAIL_MESSAGE = 'There is already an user with given email'


class CreateUserUseCase:
    def __init__(
        self,
        *,
        user_command_repo: IUserCommandRepo,
        user_query_repo: IUserQueryRepo,
        event_query_repo: IEventQueryRepo,
        password_hasher: IPasswordHasher,
    ) -> None:
        self.user_command_repo = user_command_repo
        self.user_query_repo = user_query_repo
        self.event_query_repo = event_query_repo
        self.password_hasher = password_hasher

    @classmethod
    @inject
    def depends(
        cls,
        user_command_repo: IUserCommandRepo = Depends(Provide[Container.user_command_repo]),
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(
            user_command_repo=user_command_repo,
            user_query_repo=user_query_repo,
            event_query_repo=event_query_repo,
            password_hasher=password_hasher,
        )

    @Logger.io
    async def create_user(self, *, email: str, password: str) -> UserEntity:
        """
        Sign-up is closed until the event starts. With no event seeded yet,
        sign-up stays open.

        Raises:
            DomainError: event has not started, or password too short
            ConflictError: email already registered
        """
        event = await self.event_query_repo.get_first()
        if event is not None:
            event.validate_enrollment_open()

        if await self.user_query_repo.get_by_email(email=email.lower()):
            raise ConflictError(DUPLICATED_EMAIL_MESSAGE)

        user_entity = UserEntity.create(
            email=email, plain_password=password, password_hasher=self.password_hasher
        )
        created_user = await self.user_command_repo.create(user_entity)

        metrics.users_created.inc()
        Logger.base.info(f'👤 [SIGN_UP] Created user {created_user.id}')
        return created_user
