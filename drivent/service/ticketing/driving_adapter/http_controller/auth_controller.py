from fastapi import APIRouter, Depends, status

from drivent.platform.logging.loguru_io import Logger
from drivent.service.ticketing.app.command.sign_in_use_case import SignInUseCase
from drivent.service.ticketing.driving_adapter.http_controller.schema.auth_schema import (
    SignInRequest,
    SignInResponse,
)
from drivent.service.ticketing.driving_adapter.http_controller.schema.user_schema import (
    UserResponse,
)


router = APIRouter()


@router.post('/sign-in', status_code=status.HTTP_200_OK)
@Logger.io
async def sign_in(
    request: SignInRequest,
    use_case: SignInUseCase = Depends(SignInUseCase.depends),
) -> SignInResponse:
    user_entity, session = await use_case.sign_in(
        email=request.email, password=request.password.get_secret_value()
    )
    return SignInResponse(
        user=UserResponse(id=user_entity.id or 0, email=user_entity.email),
        token=session.token,
    )
