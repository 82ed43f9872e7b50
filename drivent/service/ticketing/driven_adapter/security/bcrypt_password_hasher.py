import bcrypt
from pydantic import SecretStr

from drivent.platform.logging.loguru_io import Logger
from drivent.service.ticketing.app.interface.i_password_hasher import IPasswordHasher


class BcryptPasswordHasher(IPasswordHasher):
    """Concrete bcrypt implementation of IPasswordHasher"""

    def __init__(self, *, rounds: int = 12) -> None:
        self.rounds = rounds

    @Logger.io
    def hash_password(self, *, plain_password: SecretStr) -> str:
        password_bytes = plain_password.get_secret_value().encode('utf-8')
        hashed = bcrypt.hashpw(password_bytes, bcrypt.gensalt(rounds=self.rounds))
        return hashed.decode('utf-8')

    @Logger.io
    def verify_password(self, *, plain_password: SecretStr, hashed_password: str) -> bool:
        password_bytes = plain_password.get_secret_value().encode('utf-8')
        try:
            return bcrypt.checkpw(password_bytes, hashed_password.encode('utf-8'))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False
