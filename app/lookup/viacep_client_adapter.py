import httpx

from app.lookup.base import BasePostalCodeLookup
from app.lookup.exceptions import (
    PostalCodeLookupError,
    PostalCodeLookupNetworkError,
    PostalCodeNotFoundError,
)
from app.lookup.models import Address


class ViaCepClientAdapter(BasePostalCodeLookup):
    """Postal-code lookup backed by the ViaCEP JSON API."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: int,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=timeout_seconds,
            transport=transport,
        )

    def lookup(self, postal_code: str) -> Address:
        if len(postal_code) != 8 or not postal_code.isascii() or not postal_code.isdigit():
            raise PostalCodeNotFoundError(f"Postal code must be 8 digits, got {postal_code!r}")
        try:
            response = self._client.get(f"/ws/{postal_code}/json/")
        except httpx.HTTPError as exc:
            raise PostalCodeLookupNetworkError(f"ViaCEP network error: {exc}") from exc

        if response.status_code == 400:
            raise PostalCodeNotFoundError(f"Postal code {postal_code} rejected by ViaCEP")
        if response.status_code != 200:
            raise PostalCodeLookupNetworkError(
                f"ViaCEP returned HTTP {response.status_code}"
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise PostalCodeLookupError(f"Invalid JSON from ViaCEP: {exc}") from exc

        if not isinstance(data, dict):
            raise PostalCodeLookupError("ViaCEP response must be an object")
        if data.get("erro") in (True, "true"):
            raise PostalCodeNotFoundError(f"Postal code {postal_code} not found")

        return Address(
            street=str(data.get("logradouro") or ""),
            district=str(data.get("bairro") or ""),
            city=str(data.get("localidade") or ""),
            state=str(data.get("uf") or ""),
        )

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._client.close()
