from typing import Any, Optional

import httpx

from drivent.platform.exception.exceptions import BadGatewayError
from drivent.platform.logging.loguru_io import Logger
from drivent.service.shared_kernel.domain.value_object.brazil_document import normalize_cep
from drivent.service.ticketing.app.interface.i_cep_lookup_client import ICepLookupClient
from drivent.service.ticketing.domain.entity.enrollment_entity import CepAddress


class ViaCepClientImpl(ICepLookupClient):
    """Postal code lookup backed by https://viacep.com.br"""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.transport = transport

    @Logger.io
    async def get_address(self, *, cep: str) -> Optional[CepAddress]:
        digits = normalize_cep(cep)
        if digits is None:
            return None

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(f'{self.base_url}/{digits}/json/')
        except httpx.HTTPError as e:
            raise BadGatewayError('Postal code lookup is unavailable') from e

        # ViaCEP answers 400 for malformed codes and {"erro": true} for unknown ones
        if response.status_code == httpx.codes.BAD_REQUEST:
            return None
        if response.status_code != httpx.codes.OK:
            raise BadGatewayError(f'Postal code lookup failed with {response.status_code}')

        payload: dict[str, Any] = response.json()
        if payload.get('erro'):
            return None

        return CepAddress(
            logradouro=payload.get('logradouro', ''),
            complemento=payload.get('complemento', ''),
            bairro=payload.get('bairro', ''),
            cidade=payload.get('localidade', ''),
            uf=payload.get('uf', ''),
        )
