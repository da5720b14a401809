"""Validates submitted form values against the rule table."""

from dataclasses import replace

from app.validation.models import FieldErrors, FormValues, Invalid, Valid, ValidationResult
from app.validation.rules import RULES, Rule


def validate(values: FormValues, rules: tuple[Rule, ...] = RULES) -> ValidationResult:
    """Check every field and aggregate one message per failing field.

    Fields are independent: a failure on one never stops evaluation of the
    others. Within a field the first failing rule wins. No I/O, no state.

    Returns:
        Valid with a copy of the untouched values, or Invalid with the
        field -> message map.
    """
    errors: FieldErrors = {}
    for rule in rules:
        if rule.field in errors:
            continue
        if not rule.predicate(getattr(values, rule.field)):
            errors[rule.field] = rule.message
    if errors:
        return Invalid(errors=errors)
    return Valid(values=replace(values))
