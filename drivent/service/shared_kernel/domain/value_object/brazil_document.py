"""
Brazilian document and address formats used by enrollment.

CPF (Cadastro de Pessoas Fisicas) is the 11-digit taxpayer id whose last two
digits are mod-11 check digits. CEP is the 8-digit postal code, and UF is the
two-letter state code.
"""

import re


BRAZIL_UF_CODES = frozenset(
    {
        'AC', 'AL', 'AP', 'AM', 'BA', 'CE', 'DF', 'ES', 'GO',
        'MA', 'MT', 'MS', 'MG', 'PA', 'PB', 'PR', 'PE', 'PI',
        'RJ', 'RN', 'RS', 'RO', 'RR', 'SC', 'SP', 'SE', 'TO',
    }
)  # fmt: skip

CPF_PATTERN = re.compile(r'\d{11}')
MASKED_CEP_PATTERN = re.compile(r'\d{5}-\d{3}')
CEP_PATTERN = re.compile(r'\d{5}-?\d{3}')
MASKED_MOBILE_PHONE_PATTERN = re.compile(r'\(\d{2}\) \d{4,5}-\d{4}')


def _cpf_check_digit(digits: str) -> int:
    weight = len(digits) + 1
    total = sum(int(digit) * (weight - i) for i, digit in enumerate(digits))
    remainder = (total * 10) % 11
    return 0 if remainder == 10 else remainder


def is_valid_cpf(cpf: str) -> bool:
    """Unmasked CPF with both check digits correct. Repeated-digit CPFs are rejected."""
    if not CPF_PATTERN.fullmatch(cpf) or len(set(cpf)) == 1:
        return False
    first = _cpf_check_digit(cpf[:9])
    second = _cpf_check_digit(cpf[:9] + str(first))
    return cpf[9:] == f'{first}{second}'


def is_valid_uf(uf: str) -> bool:
    return uf in BRAZIL_UF_CODES


def is_masked_cep(cep: str) -> bool:
    return bool(MASKED_CEP_PATTERN.fullmatch(cep))


def is_masked_mobile_phone(phone: str) -> bool:
    return bool(MASKED_MOBILE_PHONE_PATTERN.fullmatch(phone))


def normalize_cep(cep: str) -> str | None:
    """'90830-563' or '90830563' -> '90830563'; anything else -> None."""
    cep = cep.strip()
    if not CEP_PATTERN.fullmatch(cep):
        return None
    return cep.replace('-', '')
