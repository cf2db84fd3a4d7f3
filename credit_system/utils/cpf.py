import re

_NON_DIGITS = re.compile(r"\D")


def normalize_cpf(value):
    """Strip the usual CPF punctuation (``782.402.120-34``) and keep the digits."""
    return _NON_DIGITS.sub("", value or "")


def _check_digit(digits):
    weight = len(digits) + 1
    total = sum(int(d) * (weight - i) for i, d in enumerate(digits))
    remainder = (total * 10) % 11
    return 0 if remainder == 10 else remainder


def is_valid_cpf(value):
    """
    Validate a Brazilian CPF number.
    - exactly 11 digits once punctuation is removed
    - not a single repeated digit (000.000.000-00 passes the checksum)
    - both trailing check digits match
    """
    cpf = normalize_cpf(value)
    if len(cpf) != 11 or cpf == cpf[0] * 11:
        return False

    first = _check_digit(cpf[:9])
    second = _check_digit(cpf[:9] + str(first))
    return cpf[9:] == f"{first}{second}"
