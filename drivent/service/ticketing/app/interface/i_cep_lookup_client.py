from abc import ABC, abstractmethod
from typing import Optional

from drivent.service.ticketing.domain.entity.enrollment_entity import CepAddress


class ICepLookupClient(ABC):
    """Port to the postal code (CEP) lookup service."""

    @abstractmethod
    async def get_address(self, *, cep: str) -> Optional[CepAddress]:
        """Returns None when the CEP is malformed or unknown."""
        pass
