"""CPF check digit computation (two mod-11 passes)."""

from app.masking.masker import DOCUMENT_NUMBER_DIGITS, strip_non_digits


def _check_digit(digits: str) -> int:
    # Weights run from len(digits) + 1 down to 2.
    weight = len(digits) + 1
    total = sum(int(d) * (weight - i) for i, d in enumerate(digits))
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def compute_check_digits(base: str) -> str:
    """Return the two check digits for nine leading CPF digits.

    Raises:
        ValueError: if *base* is not exactly nine digits.
    """
    if len(base) != 9 or not base.isascii() or not base.isdigit():
        raise ValueError(f"Expected 9 digits, got {base!r}")
    first = _check_digit(base)
    second = _check_digit(base + str(first))
    return f"{first}{second}"


def is_valid_document_number(formatted: str) -> bool:
    """Return True if *formatted* carries a CPF with correct check digits.

    Separators are ignored. Sequences of a single repeated digit are rejected
    even though they satisfy the arithmetic.
    """
    digits = strip_non_digits(formatted)
    if len(digits) != DOCUMENT_NUMBER_DIGITS:
        return False
    if digits == digits[0] * DOCUMENT_NUMBER_DIGITS:
        return False
    if _check_digit(digits[:9]) != int(digits[9]):
        return False
    return _check_digit(digits[:10]) == int(digits[10])
