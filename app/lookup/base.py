from abc import ABC, abstractmethod
from types import TracebackType

from app.lookup.models import Address


class BasePostalCodeLookup(ABC):
    """Contract for all postal-code lookup adapters.

    Adapters are context managers; leaving the block releases whatever
    connection the adapter holds.
    """

    @abstractmethod
    def lookup(self, postal_code: str) -> Address:
        """Resolve an address for a postal code.

        Args:
            postal_code: Exactly 8 ASCII digits, no separator.

        Returns:
            Address with street, district, city and state.

        Raises:
            PostalCodeNotFoundError: if the code has no address.
            PostalCodeLookupNetworkError: on transport or service failure.
        """

    def close(self) -> None:
        """Release held resources. No-op for adapters without any."""

    def __enter__(self) -> "BasePostalCodeLookup":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
