from pydantic import ValidationError
import pytest

from drivent.service.ticketing.driving_adapter.http_controller.schema.enrollment_schema import (
    UpsertEnrollmentRequest,
)
from test.shared.constants import enrollment_body


@pytest.mark.unit
class TestUpsertEnrollmentRequest:
    def test_accepts_camel_case_body(self):
        request = UpsertEnrollmentRequest.model_validate(enrollment_body())

        assert request.address.address_detail == 'apto 201'
        assert request.birthday.year == 1990

    @pytest.mark.parametrize(
        'overrides',
        [
            {'name': 'Al'},
            {'cpf': '529.982.247-25'},
            {'phone': '21999999999'},
            {'address': {'cep': '90830563'}},
            {'address': {'state': 'XX'}},
            {'address': {'street': ''}},
        ],
        ids=['short_name', 'masked_cpf', 'unmasked_phone', 'unmasked_cep', 'bad_uf', 'empty_street'],
    )
    def test_rejects_malformed_fields(self, overrides: dict):
        with pytest.raises(ValidationError):
            UpsertEnrollmentRequest.model_validate(enrollment_body(**overrides))

    def test_address_detail_is_optional(self):
        body = enrollment_body()
        del body['address']['addressDetail']

        request = UpsertEnrollmentRequest.model_validate(body)

        assert request.address.address_detail is None
