from datetime import datetime
from typing import Optional

import attrs
from pydantic import SecretStr

from drivent.platform.exception.exceptions import AuthenticationError, DomainError
from drivent.service.ticketing.app.interface.i_password_hasher import IPasswordHasher


MIN_PASSWORD_LENGTH = 6


@attrs.define
class UserEntity:
    email: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls, *, email: str, plain_password: str, password_hasher: IPasswordHasher
    ) -> 'UserEntity':
        if not email:
            raise DomainError('email is required')
        if len(plain_password) < MIN_PASSWORD_LENGTH:
            raise DomainError(f'password must have at least {MIN_PASSWORD_LENGTH} characters')

        user = cls(email=email.lower())
        user.set_password(plain_password, password_hasher)
        return user

    def set_password(self, plain_password: str, password_hasher: IPasswordHasher) -> None:
        """Set password using provided password hasher"""
        if not isinstance(password_hasher, IPasswordHasher):
            raise TypeError('password_hasher must implement IPasswordHasher interface')

        self.hashed_password = password_hasher.hash_password(
            plain_password=SecretStr(plain_password)
        )

    @staticmethod
    def validate_credentials(
        user_entity: Optional['UserEntity'],
        *,
        plain_password: str,
        password_hasher: IPasswordHasher,
    ) -> 'UserEntity':
        """Unknown email and wrong password are indistinguishable to the caller."""
        if not user_entity or not user_entity.hashed_password:
            raise AuthenticationError('email or password are incorrect')

        if not password_hasher.verify_password(
            plain_password=SecretStr(plain_password),
            hashed_password=user_entity.hashed_password,
        ):
            raise AuthenticationError('email or password are incorrect')

        return user_entity
