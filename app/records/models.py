from dataclasses import dataclass

from app.validation.models import WIRE_KEYS, FormValues


@dataclass(frozen=True)
class NormalizedRecord:
    """A validated registration plus the derived age. Immutable."""

    name: str
    document_number: str
    birth_date: str
    email: str
    postal_code: str
    street: str
    district: str
    city: str
    state: str
    age: int

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {key: getattr(self, attr) for attr, key in WIRE_KEYS.items()}
        data["age"] = self.age
        return data

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> "NormalizedRecord":
        """Build from a stored entry.

        Raises:
            ValueError: if the entry lacks a string field or an integer age.
        """
        values: dict[str, str] = {}
        for attr, key in WIRE_KEYS.items():
            raw = data.get(key, "")
            if not isinstance(raw, str):
                raise ValueError(f"'{key}' must be a string")
            values[attr] = raw
        age = data.get("age")
        if not isinstance(age, int) or isinstance(age, bool):
            raise ValueError("'age' must be an integer")
        return cls(**values, age=age)

    def form_values(self) -> FormValues:
        return FormValues(**{attr: getattr(self, attr) for attr in WIRE_KEYS})
