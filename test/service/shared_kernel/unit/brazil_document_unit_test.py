import pytest

from drivent.service.shared_kernel.domain.value_object.brazil_document import (
    is_masked_cep,
    is_masked_mobile_phone,
    is_valid_cpf,
    is_valid_uf,
    normalize_cep,
)


@pytest.mark.unit
class TestCpf:
    @pytest.mark.parametrize('cpf', ['52998224725', '11144477735'])
    def test_valid(self, cpf: str):
        assert is_valid_cpf(cpf)

    @pytest.mark.parametrize(
        'cpf',
        ['52998224724', '00000000000', '529.982.247-25', '5299822472', '', '52998224725\n'],
        ids=['wrong_digit', 'repeated', 'masked', 'short', 'empty', 'trailing_newline'],
    )
    def test_invalid(self, cpf: str):
        assert not is_valid_cpf(cpf)


@pytest.mark.unit
class TestCep:
    @pytest.mark.parametrize(
        'cep,expected',
        [('90830-563', '90830563'), ('90830563', '90830563'), (' 90830-563 ', '90830563')],
    )
    def test_normalize(self, cep: str, expected: str):
        assert normalize_cep(cep) == expected

    @pytest.mark.parametrize('cep', ['9083-0563', '90830-56', 'abcde-fgh', '', '90830-563\nx'])
    def test_normalize_rejects_malformed(self, cep: str):
        assert normalize_cep(cep) is None

    def test_masked(self):
        assert is_masked_cep('90830-563')
        assert not is_masked_cep('90830563')
        assert not is_masked_cep('90830-563\n')


@pytest.mark.unit
class TestUfAndPhone:
    def test_uf(self):
        assert is_valid_uf('RS')
        assert not is_valid_uf('rs')
        assert not is_valid_uf('XX')

    @pytest.mark.parametrize('phone', ['(21) 98999-9999', '(11) 3333-4444'])
    def test_masked_phone(self, phone: str):
        assert is_masked_mobile_phone(phone)

    @pytest.mark.parametrize('phone', ['21989999999', '(21) 98999-9999\n', ' (21) 98999-9999'])
    def test_unmasked_phone(self, phone: str):
        assert not is_masked_mobile_phone(phone)
