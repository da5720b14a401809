"""Ordered rule table for the registration form.

Each rule is a (field, predicate, message) triple. For a given field the
rules are tried in the order they appear here and the first failing rule
supplies that field's message.
"""

import re
from collections.abc import Callable
from typing import NamedTuple

from app.validation.checksum import is_valid_document_number

NAME_MAX_LENGTH = 150
EMAIL_MAX_LENGTH = 200

_NAME_RE = re.compile(r"[a-zA-ZÀ-ú\s]+")
_DOCUMENT_NUMBER_RE = re.compile(r"\d{3}\.\d{3}\.\d{3}-\d{2}", re.ASCII)
_BIRTH_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_POSTAL_CODE_RE = re.compile(r"\d{5}-\d{3}", re.ASCII)
_EMAIL_RE = re.compile(
    r"(?!\.)(?!.*\.\.)[A-Z0-9_'+\-.]*[A-Z0-9_+\-]"
    r"@(?:[A-Z0-9][A-Z0-9\-]*\.)+[A-Z]{2,}",
    re.IGNORECASE | re.ASCII,
)

MSG_NAME_REQUIRED = "Nome é obrigatório"
MSG_NAME_TOO_LONG = f"Máximo de {NAME_MAX_LENGTH} caracteres"
MSG_NAME_INVALID = "Nome inválido"
MSG_DOCUMENT_NUMBER_INVALID = "CPF inválido"
MSG_BIRTH_DATE_INVALID = "Data de nascimento inválida"
MSG_EMAIL_INVALID = "E-mail inválido"
MSG_EMAIL_TOO_LONG = f"Máximo de {EMAIL_MAX_LENGTH} caracteres"
MSG_POSTAL_CODE_INVALID = "CEP inválido"


class Rule(NamedTuple):
    field: str
    predicate: Callable[[str], bool]
    message: str


def _matches(pattern: re.Pattern[str]) -> Callable[[str], bool]:
    return lambda value: pattern.fullmatch(value) is not None


def _max_length(limit: int) -> Callable[[str], bool]:
    return lambda value: len(value) <= limit


RULES: tuple[Rule, ...] = (
    Rule("name", lambda value: len(value) >= 1, MSG_NAME_REQUIRED),
    Rule("name", _max_length(NAME_MAX_LENGTH), MSG_NAME_TOO_LONG),
    Rule("name", _matches(_NAME_RE), MSG_NAME_INVALID),
    Rule("document_number", _matches(_DOCUMENT_NUMBER_RE), MSG_DOCUMENT_NUMBER_INVALID),
    Rule("document_number", is_valid_document_number, MSG_DOCUMENT_NUMBER_INVALID),
    Rule("birth_date", _matches(_BIRTH_DATE_RE), MSG_BIRTH_DATE_INVALID),
    Rule("email", _matches(_EMAIL_RE), MSG_EMAIL_INVALID),
    Rule("email", _max_length(EMAIL_MAX_LENGTH), MSG_EMAIL_TOO_LONG),
    Rule("postal_code", _matches(_POSTAL_CODE_RE), MSG_POSTAL_CODE_INVALID),
)

# Address fields are free text; they carry no rules.
OPTIONAL_FIELDS: frozenset[str] = frozenset({"street", "district", "city", "state"})
