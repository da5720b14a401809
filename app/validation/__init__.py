from app.validation.checksum import compute_check_digits, is_valid_document_number
from app.validation.models import FieldErrors, FormValues, Invalid, Valid, ValidationResult
from app.validation.validator import validate

__all__ = [
    "FieldErrors",
    "FormValues",
    "Invalid",
    "Valid",
    "ValidationResult",
    "compute_check_digits",
    "is_valid_document_number",
    "validate",
]
