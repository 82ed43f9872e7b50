from fastapi import APIRouter, Depends, status

from drivent.platform.logging.loguru_io import Logger
from drivent.service.ticketing.app.command.create_user_use_case import CreateUserUseCase
from drivent.service.ticketing.driving_adapter.http_controller.schema.user_schema import (
    CreateUserRequest,
    UserResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_user(
    request: CreateUserRequest,
    use_case: CreateUserUseCase = Depends(CreateUserUseCase.depends),
) -> UserResponse:
    user_entity = await use_case.create_user(
        email=request.email, password=request.password.get_secret_value()
    )
    return UserResponse(id=user_entity.id or 0, email=user_entity.email)
