from fastapi.testclient import TestClient
import pytest
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from drivent.platform.constant.route_constant import ENROLLMENT_BASE, ENROLLMENT_CEP
from drivent.service.ticketing.driven_adapter.model.enrollment_model import AddressModel
from test.shared.constants import INVALID_CPF, TEST_EMAIL, UNKNOWN_CEP, VALID_CEP, enrollment_body
from test.shared.fakes import FakeCepClient
from test.shared.factories import create_enrollment
from test.shared.utils import create_signed_in_user


@pytest.mark.integration
class TestGetEnrollmentAPI:
    def test_no_enrollment_returns_no_content(self, client: TestClient):
        _, headers = create_signed_in_user(client, TEST_EMAIL)

        response = client.get(ENROLLMENT_BASE, headers=headers)

        assert response.status_code == 204
        assert response.content == b''

    def test_returns_enrollment_with_address(self, client: TestClient, db_session: Session):
        user_id, headers = create_signed_in_user(client, TEST_EMAIL)
        enrollment = create_enrollment(db_session, user_id=user_id)

        response = client.get(ENROLLMENT_BASE, headers=headers)

        assert response.status_code == 200
        data = response.json()
        assert data['id'] == enrollment.id
        assert data['cpf'] == enrollment.cpf
        assert data['phone'] == enrollment.phone
        assert data['address']['cep'] == VALID_CEP
        assert data['address']['addressDetail'] is None


@pytest.mark.integration
class TestCepLookupAPI:
    def test_known_cep_returns_address(self, client: TestClient):
        response = client.get(ENROLLMENT_CEP, params={'cep': VALID_CEP})

        assert response.status_code == 200
        assert response.json() == {
            'logradouro': 'Rua Dona Margarida',
            'complemento': '',
            'bairro': 'Azenha',
            'cidade': 'Porto Alegre',
            'uf': 'RS',
        }

    def test_unmasked_cep_is_accepted(self, client: TestClient):
        response = client.get(ENROLLMENT_CEP, params={'cep': VALID_CEP.replace('-', '')})

        assert response.status_code == 200

    @pytest.mark.parametrize('cep', [UNKNOWN_CEP, 'abc', '123'])
    def test_invalid_or_unknown_cep_returns_no_content(self, client: TestClient, cep: str):
        response = client.get(ENROLLMENT_CEP, params={'cep': cep})

        assert response.status_code == 204


@pytest.mark.integration
class TestUpsertEnrollmentAPI:
    def test_requires_authentication(self, client: TestClient):
        response = client.post(ENROLLMENT_BASE, json=enrollment_body())

        assert response.status_code == 401

    @pytest.mark.parametrize(
        'overrides',
        [
            {'name': 'Al'},
            {'cpf': INVALID_CPF},
            {'cpf': '529.982.247-25'},
            {'phone': '21999999999'},
            {'phone': '(21) 98999-9999\n'},
            {'cpf': '52998224725\n'},
            {'birthday': 'yesterday'},
            {'address': {'cep': '90830563'}},
            {'address': {'cep': '90830-563\n'}},
            {'address': {'state': 'XX'}},
            {'address': {'street': ''}},
        ],
    )
    def test_invalid_body_is_rejected(self, client: TestClient, overrides: dict):
        _, headers = create_signed_in_user(client, TEST_EMAIL)

        response = client.post(ENROLLMENT_BASE, json=enrollment_body(**overrides), headers=headers)

        assert response.status_code == 400

    def test_unknown_cep_is_rejected(self, client: TestClient, fake_cep_client: FakeCepClient):
        _, headers = create_signed_in_user(client, TEST_EMAIL)

        response = client.post(
            ENROLLMENT_BASE,
            json=enrollment_body(address={'cep': UNKNOWN_CEP}),
            headers=headers,
        )

        assert response.status_code == 400
        assert fake_cep_client.lookups == [UNKNOWN_CEP]

    def test_create_enrollment(self, client: TestClient):
        _, headers = create_signed_in_user(client, TEST_EMAIL)

        response = client.post(ENROLLMENT_BASE, json=enrollment_body(), headers=headers)

        assert response.status_code == 200
        saved = client.get(ENROLLMENT_BASE, headers=headers).json()
        assert saved['name'] == 'Ada Lovelace'
        assert saved['address']['addressDetail'] == 'apto 201'

    def test_update_keeps_single_address(self, client: TestClient, db_session: Session):
        _, headers = create_signed_in_user(client, TEST_EMAIL)
        client.post(ENROLLMENT_BASE, json=enrollment_body(), headers=headers)

        response = client.post(
            ENROLLMENT_BASE,
            json=enrollment_body(name='Ada King', address={'number': '42', 'addressDetail': ''}),
            headers=headers,
        )

        assert response.status_code == 200
        saved = client.get(ENROLLMENT_BASE, headers=headers).json()
        assert saved['name'] == 'Ada King'
        assert saved['address']['number'] == '42'
        assert saved['address']['addressDetail'] is None
        assert db_session.execute(select(func.count(AddressModel.id))).scalar_one() == 1
