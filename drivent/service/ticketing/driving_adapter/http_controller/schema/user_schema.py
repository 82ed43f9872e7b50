from pydantic import EmailStr, Field, SecretStr

from drivent.service.shared_kernel.driving_adapter.schema.camel_schema import CamelModel


class CreateUserRequest(CamelModel):
    model_config = {
        'json_schema_extra': {'example': {'email': 'ada@drivent.com', 'password': 'p4ssw0rd'}}
    }

    email: EmailStr
    password: SecretStr = Field(min_length=6)


class UserResponse(CamelModel):
    id: int
    email: str
