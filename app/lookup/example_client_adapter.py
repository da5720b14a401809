"""Offline postal-code lookup adapter.

Useful for local development and tests. Implement BasePostalCodeLookup and
register the provider in PostalCodeLookupFactory to add a real service.
"""

from typing import ClassVar

from app.lookup.base import BasePostalCodeLookup
from app.lookup.exceptions import PostalCodeNotFoundError
from app.lookup.models import Address


class ExampleLookupAdapter(BasePostalCodeLookup):
    """Answers from a fixed table; unknown codes are not found."""

    DEFAULT_ADDRESSES: ClassVar[dict[str, Address]] = {
        "01310930": Address(
            street="Avenida Paulista",
            district="Bela Vista",
            city="São Paulo",
            state="SP",
        ),
    }

    def __init__(self, addresses: dict[str, Address] | None = None) -> None:
        self._addresses = dict(self.DEFAULT_ADDRESSES if addresses is None else addresses)

    def lookup(self, postal_code: str) -> Address:
        address = self._addresses.get(postal_code)
        if address is None:
            raise PostalCodeNotFoundError(f"Postal code {postal_code} not found")
        return address
