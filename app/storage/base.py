from abc import ABC, abstractmethod

from app.records.models import NormalizedRecord


class BaseRecordStore(ABC):
    """Contract for list-stores holding saved registrations."""

    @abstractmethod
    def load_all(self) -> list[NormalizedRecord]:
        """Return all saved records in insertion order.

        An absent or unreadable store is an empty list, never an error.
        """

    @abstractmethod
    def save_all(self, records: list[NormalizedRecord]) -> None:
        """Replace the stored sequence with *records*.

        Raises:
            StorageError: if the sequence cannot be written.
        """
