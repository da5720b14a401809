"""Display masks for CPF and CEP input.

Both masks are pure rewrites of the full current input: every keystroke
recomputes the display string from the digits alone, so feeding the output
back into the field is always safe.
"""

import re

_NON_DIGITS_RE = re.compile(r"[^0-9]")

DOCUMENT_NUMBER_DIGITS = 11
POSTAL_CODE_DIGITS = 8


def strip_non_digits(value: str) -> str:
    """Return only the ASCII digits of *value*."""
    return _NON_DIGITS_RE.sub("", value or "")


def mask_document_number(raw: str) -> str:
    """Format raw CPF input as ``NNN.NNN.NNN-NN``, as far as digits allow.

    >>> mask_document_number("1114447")
    '111.444.7'
    >>> mask_document_number("11144477735")
    '111.444.777-35'
    """
    digits = strip_non_digits(raw)[:DOCUMENT_NUMBER_DIGITS]
    if len(digits) <= 3:
        return digits
    if len(digits) <= 6:
        return f"{digits[:3]}.{digits[3:]}"
    if len(digits) <= 9:
        return f"{digits[:3]}.{digits[3:6]}.{digits[6:]}"
    return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"


def mask_postal_code(raw: str) -> str:
    """Format raw CEP input as ``NNNNN-NNN``, as far as digits allow."""
    digits = strip_non_digits(raw)[:POSTAL_CODE_DIGITS]
    if len(digits) <= 5:
        return digits
    return f"{digits[:5]}-{digits[5:]}"
