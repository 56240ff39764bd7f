"""CPF and phone validation helpers."""

import re

from django.core.exceptions import ValidationError

_NON_DIGITS = re.compile(r'\D')


def normalize_cpf(value: str) -> str:
    """Strip formatting (dots, dash, spaces) from a CPF."""
    return _NON_DIGITS.sub('', value or '')


def _check_digit(digits: str) -> int:
    weight = len(digits) + 1
    total = sum(int(d) * (weight - i) for i, d in enumerate(digits))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def is_valid_cpf(value: str) -> bool:
    """
    Verify a CPF using the two mod-11 check digits.

    Sequences of a single repeated digit (000.000.000-00, 111...) pass the
    arithmetic but are not issued, so they are rejected.
    """
    cpf = normalize_cpf(value)

    if len(cpf) != 11:
        return False
    if cpf == cpf[0] * 11:
        return False

    first = _check_digit(cpf[:9])
    if int(cpf[9]) != first:
        return False

    second = _check_digit(cpf[:10])
    return int(cpf[10]) == second


def validate_cpf(value: str) -> None:
    if not is_valid_cpf(value):
        raise ValidationError('Invalid CPF', code='invalid_cpf')


def validate_phone(value: str) -> None:
    """Brazilian mobile: 2-digit area code followed by a 9-digit number starting with 9."""
    digits = _NON_DIGITS.sub('', value or '')
    if len(digits) != 11 or digits[2] != '9':
        raise ValidationError('Phone must have 11 digits: (XX) 9XXXX-XXXX', code='invalid_phone')
