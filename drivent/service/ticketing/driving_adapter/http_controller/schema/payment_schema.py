from datetime import datetime

from pydantic import Field, SecretStr

from drivent.service.shared_kernel.driving_adapter.schema.camel_schema import CamelModel


class CardDataRequest(CamelModel):
    issuer: str = Field(min_length=1)
    number: str = Field(min_length=4, repr=False)
    name: str = Field(min_length=1)
    expiration_date: str = Field(min_length=1)
    cvv: SecretStr


class ProcessPaymentRequest(CamelModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'ticketId': 1,
                'cardData': {
                    'issuer': 'VISA',
                    'number': '4111111111111111',
                    'name': 'ADA LOVELACE',
                    'expirationDate': '12/29',
                    'cvv': '123',
                },
            }
        }
    }

    ticket_id: int = Field(ge=1)
    card_data: CardDataRequest


class PaymentResponse(CamelModel):
    id: int
    ticket_id: int
    value: int
    card_issuer: str
    card_last_digits: str
    created_at: datetime
    updated_at: datetime
