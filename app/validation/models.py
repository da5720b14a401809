from dataclasses import dataclass, field, fields

# Attribute name -> wire/storage key, in form order.
WIRE_KEYS: dict[str, str] = {
    "name": "name",
    "document_number": "documentNumber",
    "birth_date": "birthDate",
    "email": "email",
    "postal_code": "postalCode",
    "street": "street",
    "district": "district",
    "city": "city",
    "state": "state",
}

FieldErrors = dict[str, str]


@dataclass
class FormValues:
    """Raw string values of the registration form, in form order."""

    name: str = ""
    document_number: str = ""
    birth_date: str = ""
    email: str = ""
    postal_code: str = ""
    street: str = ""
    district: str = ""
    city: str = ""
    state: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> "FormValues":
        """Build from wire keys; missing or null entries become empty strings."""
        values: dict[str, str] = {}
        for attr, key in WIRE_KEYS.items():
            raw = data.get(key)
            values[attr] = "" if raw is None else str(raw)
        return cls(**values)

    def to_dict(self) -> dict[str, str]:
        return {key: getattr(self, attr) for attr, key in WIRE_KEYS.items()}

    def reset(self) -> None:
        for f in fields(self):
            setattr(self, f.name, "")


@dataclass(frozen=True)
class Valid:
    """Successful validation; carries the unmodified input values."""

    values: FormValues

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    """Failed validation; one message per failing field."""

    errors: FieldErrors = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return False


ValidationResult = Valid | Invalid
