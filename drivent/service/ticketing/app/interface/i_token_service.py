from abc import ABC, abstractmethod


class ITokenService(ABC):
    @abstractmethod
    def issue(self, *, user_id: int) -> str:
        pass

    @abstractmethod
    def read_user_id(self, token: str) -> int:
        """Raises AuthenticationError when the token is malformed or forged."""
        pass
