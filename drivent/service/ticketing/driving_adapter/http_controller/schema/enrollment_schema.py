from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from drivent.service.shared_kernel.domain.value_object.brazil_document import (
    is_masked_cep,
    is_masked_mobile_phone,
    is_valid_uf,
)
from drivent.service.shared_kernel.driving_adapter.schema.camel_schema import CamelModel


class AddressRequest(CamelModel):
    cep: str
    street: str = Field(min_length=1)
    city: str = Field(min_length=1)
    number: str = Field(min_length=1)
    state: str = Field(min_length=2, max_length=2)
    neighborhood: str = Field(min_length=1)
    address_detail: Optional[str] = None

    @field_validator('cep')
    @classmethod
    def validate_cep(cls, v: str) -> str:
        if not is_masked_cep(v):
            raise ValueError('cep must be in the 99999-999 format')
        return v

    @field_validator('state')
    @classmethod
    def validate_state(cls, v: str) -> str:
        if not is_valid_uf(v):
            raise ValueError('state must be a Brazilian UF code')
        return v


class UpsertEnrollmentRequest(CamelModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'name': 'Ada Lovelace',
                'cpf': '52998224725',
                'birthday': '1990-12-10',
                'phone': '(21) 98999-9999',
                'address': {
                    'cep': '90830-563',
                    'street': 'Rua Dona Margarida',
                    'city': 'Porto Alegre',
                    'number': '120',
                    'state': 'RS',
                    'neighborhood': 'Azenha',
                    'addressDetail': 'apto 201',
                },
            }
        }
    }

    name: str = Field(min_length=3)
    cpf: str = Field(pattern=r'^\d{11}$')
    birthday: datetime
    phone: str
    address: AddressRequest

    @field_validator('phone')
    @classmethod
    def validate_phone(cls, v: str) -> str:
        if not is_masked_mobile_phone(v):
            raise ValueError('phone must be in the (99) 99999-9999 format')
        return v


class AddressResponse(CamelModel):
    id: int
    cep: str
    street: str
    city: str
    state: str
    number: str
    neighborhood: str
    address_detail: Optional[str] = None


class EnrollmentResponse(CamelModel):
    id: int
    name: str
    cpf: str
    birthday: datetime
    phone: str
    address: AddressResponse


class CepAddressResponse(CamelModel):
    logradouro: str
    complemento: str
    bairro: str
    cidade: str
    uf: str
