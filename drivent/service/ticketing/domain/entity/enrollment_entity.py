from datetime import datetime
from typing import Optional

import attrs

from drivent.platform.exception.exceptions import DomainError
from drivent.service.shared_kernel.domain.value_object.brazil_document import (
    is_valid_cpf,
    is_valid_uf,
)


MIN_NAME_LENGTH = 3


@attrs.define
class AddressEntity:
    cep: str
    street: str
    city: str
    state: str
    number: str
    neighborhood: str
    address_detail: Optional[str] = None
    id: Optional[int] = None
    enrollment_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __attrs_post_init__(self) -> None:
        if not is_valid_uf(self.state):
            raise DomainError(f'Invalid state: {self.state}')
        # Empty detail and missing detail are stored the same way
        if self.address_detail == '':
            self.address_detail = None


@attrs.define
class EnrollmentEntity:
    name: str
    cpf: str
    birthday: datetime
    phone: str
    user_id: int
    address: Optional[AddressEntity] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        *,
        user_id: int,
        name: str,
        cpf: str,
        birthday: datetime,
        phone: str,
        address: AddressEntity,
    ) -> 'EnrollmentEntity':
        if len(name.strip()) < MIN_NAME_LENGTH:
            raise DomainError(f'name must have at least {MIN_NAME_LENGTH} characters')
        if not is_valid_cpf(cpf):
            raise DomainError('Invalid CPF')

        return cls(
            name=name.strip(),
            cpf=cpf,
            birthday=birthday,
            phone=phone,
            user_id=user_id,
            address=address,
        )


@attrs.frozen
class CepAddress:
    """Address resolved from a postal code, in the lookup service's vocabulary."""

    logradouro: str
    complemento: str
    bairro: str
    cidade: str
    uf: str
