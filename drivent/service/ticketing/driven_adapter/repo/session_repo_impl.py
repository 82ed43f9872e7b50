from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from drivent.platform.logging.loguru_io import Logger
from drivent.service.ticketing.app.interface.i_session_repo import ISessionRepo
from drivent.service.ticketing.domain.entity.session_entity import SessionEntity
from drivent.service.ticketing.driven_adapter.model.session_model import SessionModel


class SessionRepoImpl(ISessionRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create(self, session_entity: SessionEntity) -> SessionEntity:
        async with self.session_factory() as session:
            session_model = SessionModel(
                user_id=session_entity.user_id, token=session_entity.token
            )
            session.add(session_model)
            await session.commit()
            await session.refresh(session_model)
            return self._model_to_entity(session_model)

    @Logger.io
    async def get_by_token(self, *, token: str) -> Optional[SessionEntity]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(SessionModel).where(SessionModel.token == token).limit(1)
            )
            session_model = result.scalar_one_or_none()
            return self._model_to_entity(session_model) if session_model else None

    def _model_to_entity(self, session_model: SessionModel) -> SessionEntity:
        return SessionEntity(
            id=session_model.id,
            user_id=session_model.user_id,
            token=session_model.token,
            created_at=session_model.created_at,
        )
