from app.records.models import NormalizedRecord
from app.validation.models import WIRE_KEYS, FormValues


def assemble(values: FormValues, age: int) -> NormalizedRecord:
    """Merge validated form values with the derived age."""
    return NormalizedRecord(**{attr: getattr(values, attr) for attr in WIRE_KEYS}, age=age)
