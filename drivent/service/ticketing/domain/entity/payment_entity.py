from datetime import datetime
from typing import Optional

import attrs

from drivent.platform.exception.exceptions import DomainError


CARD_LAST_DIGITS_LENGTH = 4


@attrs.define
class PaymentEntity:
    ticket_id: int
    value: int
    card_issuer: str
    card_last_digits: str
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_card(
        cls, *, ticket_id: int, value: int, card_issuer: str, card_number: str
    ) -> 'PaymentEntity':
        """Only the issuer and the last digits of the card are kept."""
        digits = card_number.replace(' ', '')
        if not digits.isdigit() or len(digits) < CARD_LAST_DIGITS_LENGTH:
            raise DomainError('Invalid card number')

        return cls(
            ticket_id=ticket_id,
            value=value,
            card_issuer=card_issuer,
            card_last_digits=digits[-CARD_LAST_DIGITS_LENGTH:],
        )
