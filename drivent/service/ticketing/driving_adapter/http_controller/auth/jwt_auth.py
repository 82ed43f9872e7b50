"""
Session token issuing and verification
"""

from datetime import datetime, timezone
from typing import Any, Dict

import jwt

from drivent.platform.config.core_setting import settings
from drivent.platform.exception.exceptions import AuthenticationError
from drivent.service.ticketing.app.interface.i_token_service import ITokenService


class JwtAuth(ITokenService):
    def __init__(self) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM

    def issue(self, *, user_id: int) -> str:
        # No exp claim: a token lives as long as its session row
        payload: Dict[str, Any] = {
            'userId': user_id,
            'iat': datetime.now(timezone.utc),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError as e:
            raise AuthenticationError() from e

    def read_user_id(self, token: str) -> int:
        user_id = self.decode_jwt_token(token).get('userId')
        if not isinstance(user_id, int):
            raise AuthenticationError()
        return user_id
