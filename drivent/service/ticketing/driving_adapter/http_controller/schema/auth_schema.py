from pydantic import EmailStr, SecretStr

from drivent.service.shared_kernel.driving_adapter.schema.camel_schema import CamelModel
from drivent.service.ticketing.driving_adapter.http_controller.schema.user_schema import (
    UserResponse,
)


class SignInRequest(CamelModel):
    email: EmailStr
    password: SecretStr


class SignInResponse(CamelModel):
    user: UserResponse
    token: str
