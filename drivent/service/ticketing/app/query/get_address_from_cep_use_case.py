from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from drivent.platform.config.di import Container
from drivent.platform.logging.loguru_io import Logger
from drivent.service.ticketing.app.interface.i_cep_lookup_client import ICepLookupClient
from drivent.service.ticketing.domain.entity.enrollment_entity import CepAddress


class GetAddressFromCepUseCase:
    def __init__(self, cep_lookup_client: ICepLookupClient) -> None:
        self.cep_lookup_client = cep_lookup_client

    @classmethod
    @inject
    def depends(
        cls,
        cep_lookup_client: ICepLookupClient = Depends(Provide[Container.via_cep_client]),
    ) -> Self:
        return cls(cep_lookup_client=cep_lookup_client)

    @Logger.io
    async def lookup(self, *, cep: str) -> Optional[CepAddress]:
        """None for malformed and unknown codes alike."""
        return await self.cep_lookup_client.get_address(cep=cep)
