from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from drivent.platform.config.di import Container
from drivent.platform.exception.exceptions import AuthenticationError
from drivent.service.ticketing.app.interface.i_session_repo import ISessionRepo
from drivent.service.ticketing.app.interface.i_token_service import ITokenService


bearer_scheme = HTTPBearer(auto_error=False)


@inject
async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    token_service: ITokenService = Depends(Provide[Container.jwt_auth]),
    session_repo: ISessionRepo = Depends(Provide[Container.session_repo]),
) -> int:
    """
    Resolve the signed-in user from `Authorization: Bearer <token>`.

    The token must verify and must still be held by a session row; signing the
    same payload without a session is rejected.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError()

    token = credentials.credentials
    user_id = token_service.read_user_id(token)

    session = await session_repo.get_by_token(token=token)
    if session is None or session.user_id != user_id:
        raise AuthenticationError()

    return user_id
