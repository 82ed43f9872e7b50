from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from drivent.platform.config.di import Container
from drivent.platform.exception.exceptions import AuthenticationError
from drivent.platform.logging.loguru_io import Logger
from drivent.platform.metrics.drivent_metrics import metrics
from drivent.service.ticketing.app.interface.i_password_hasher import IPasswordHasher
from drivent.service.ticketing.app.interface.i_session_repo import ISessionRepo
from drivent.service.ticketing.app.interface.i_token_service import ITokenService
from drivent.service.ticketing.app.interface.i_user_query_repo import IUserQueryRepo
from drivent.service.ticketing.domain.entity.session_entity import SessionEntity
from drivent.service.ticketing.domain.entity.user_entity import UserEntity


class SignInUseCase:
    def __init__(
        self,
        *,
        user_query_repo: IUserQueryRepo,
        session_repo: ISessionRepo,
        token_service: ITokenService,
        password_hasher: IPasswordHasher,
    ) -> None:
        self.user_query_repo = user_query_repo
        self.session_repo = session_repo
        self.token_service = token_service
        self.password_hasher = password_hasher

    @classmethod
    @inject
    def depends(
        cls,
        user_query_repo: IUserQueryRepo = Depends(Provide[Container.user_query_repo]),
        session_repo: ISessionRepo = Depends(Provide[Container.session_repo]),
        token_service: ITokenService = Depends(Provide[Container.jwt_auth]),
        password_hasher: IPasswordHasher = Depends(Provide[Container.password_hasher]),
    ) -> Self:
        return cls(
            user_query_repo=user_query_repo,
            session_repo=session_repo,
            token_service=token_service,
            password_hasher=password_hasher,
        )

    @Logger.io
    async def sign_in(self, *, email: str, password: str) -> tuple[UserEntity, SessionEntity]:
        user_entity = await self.user_query_repo.get_by_email(email=email.lower())
        try:
            user_entity = UserEntity.validate_credentials(
                user_entity, plain_password=password, password_hasher=self.password_hasher
            )
        except AuthenticationError:
            metrics.record_sign_in(success=False)
            raise

        assert user_entity.id is not None
        token = self.token_service.issue(user_id=user_entity.id)
        session = await self.session_repo.create(
            SessionEntity(user_id=user_entity.id, token=token)
        )

        metrics.record_sign_in(success=True)
        return user_entity, session
