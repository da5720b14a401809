"""Registration form session: masking, address lookup and submit flow."""

import time
from collections.abc import Callable
from dataclasses import fields

from app.form.messages import TimedMessage
from app.logging.logger import Log, redact_document_number
from app.lookup.base import BasePostalCodeLookup
from app.lookup.exceptions import PostalCodeLookupError, PostalCodeNotFoundError
from app.masking.masker import (
    POSTAL_CODE_DIGITS,
    mask_document_number,
    mask_postal_code,
    strip_non_digits,
)
from app.records.age import calculate_age
from app.records.assembler import assemble
from app.records.models import NormalizedRecord
from app.storage.repository import CadastroRepository
from app.validation.models import FieldErrors, FormValues, Invalid, ValidationResult
from app.validation.rules import MSG_BIRTH_DATE_INVALID, MSG_POSTAL_CODE_INVALID
from app.validation.validator import validate

SUCCESS_MESSAGE = "Cadastro realizado com sucesso!"
MSG_LOOKUP_FAILED = "Erro ao buscar CEP"

_FIELD_NAMES = frozenset(f.name for f in fields(FormValues))


class FormSession:
    """Owns the mutable form values and the errors shown next to them.

    Persistence is optional: without a repository, a successful submit only
    validates and assembles the record.
    """

    def __init__(
        self,
        *,
        lookup: BasePostalCodeLookup | None = None,
        repository: CadastroRepository | None = None,
        age_calculator: Callable[[str], int] = calculate_age,
        success_ttl_ms: int = 2000,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.values = FormValues()
        self.errors: FieldErrors = {}
        self._lookup = lookup
        self._repository = repository
        self._age_calculator = age_calculator
        self._success = TimedMessage(success_ttl_ms, clock=clock)
        self.last_record: NormalizedRecord | None = None
        self._lookup_error: str | None = None

    @property
    def success_message(self) -> str | None:
        return self._success.current()

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def set_field(self, name: str, value: str) -> None:
        if name not in _FIELD_NAMES:
            raise KeyError(f"Unknown form field: {name}")
        setattr(self.values, name, value)

    def type_document_number(self, raw: str) -> str:
        """Store and return the masked CPF display value."""
        self.values.document_number = mask_document_number(raw)
        return self.values.document_number

    def type_postal_code(self, raw: str) -> str:
        """Store and return the masked CEP display value."""
        self._lookup_error = None
        self.values.postal_code = mask_postal_code(raw)
        return self.values.postal_code

    # ------------------------------------------------------------------
    # Address lookup
    # ------------------------------------------------------------------

    def lookup_address(self) -> bool:
        """Fill address fields from the current postal code.

        Does nothing unless the postal code has exactly 8 digits. Lookup
        failures become an error on ``postal_code``; they are never raised.

        Returns:
            True if the address fields were patched.
        """
        if self._lookup is None:
            return False
        postal_code = strip_non_digits(self.values.postal_code)
        if len(postal_code) != POSTAL_CODE_DIGITS:
            return False

        try:
            address = self._lookup.lookup(postal_code)
        except PostalCodeNotFoundError:
            Log.info(f"Postal code {postal_code} not found")
            self._lookup_error = MSG_POSTAL_CODE_INVALID
            self.errors["postal_code"] = MSG_POSTAL_CODE_INVALID
            return False
        except PostalCodeLookupError as exc:
            Log.warning(f"Postal code lookup failed: {exc}")
            self._lookup_error = MSG_LOOKUP_FAILED
            self.errors["postal_code"] = MSG_LOOKUP_FAILED
            return False

        self.values.street = address.street
        self.values.district = address.district
        self.values.city = address.city
        self.values.state = address.state
        self._lookup_error = None
        self.errors.pop("postal_code", None)
        return True

    # ------------------------------------------------------------------
    # Submit
    # ------------------------------------------------------------------

    def submit(self) -> ValidationResult:
        """Validate the form; on success assemble, persist and reset it.

        The error map is replaced on every submit, except that a failed
        address lookup stays on ``postal_code`` until the postal code changes
        or a lookup succeeds. A postal code the lookup service does not know
        blocks the submit; a lookup transport failure does not. Storage
        failures are propagated and leave the form values untouched for a
        retry.
        """
        result = validate(self.values)
        if isinstance(result, Invalid):
            self.errors = dict(result.errors)
            if self._lookup_error is not None:
                self.errors.setdefault("postal_code", self._lookup_error)
            result = Invalid(errors=dict(self.errors))
            Log.info(f"Validation failed for fields: {sorted(self.errors)}")
            return result

        if self._lookup_error == MSG_POSTAL_CODE_INVALID:
            self.errors = {"postal_code": self._lookup_error}
            Log.info("Submit blocked: postal code unknown to the lookup service")
            return Invalid(errors=dict(self.errors))

        record = self._build_record(result.values)
        if record is None:
            return Invalid(errors=dict(self.errors))

        if self._repository is not None:
            self._repository.add(record)
        Log.info(
            f"Registration accepted for {redact_document_number(record.document_number)}"
        )

        self.errors = (
            {"postal_code": self._lookup_error} if self._lookup_error is not None else {}
        )
        self._lookup_error = None
        self.values.reset()
        self._success.set(SUCCESS_MESSAGE)
        self.last_record = record
        return result

    def _build_record(self, values: FormValues) -> NormalizedRecord | None:
        try:
            age = self._age_calculator(values.birth_date)
        except ValueError:
            # Pattern-valid but impossible dates such as 2020-02-30.
            self.errors = {"birth_date": MSG_BIRTH_DATE_INVALID}
            return None
        return assemble(values, age)
