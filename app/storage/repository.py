from app.logging.logger import Log
from app.records.models import NormalizedRecord
from app.storage.base import BaseRecordStore


class CadastroRepository:
    """Append and positional-delete operations over a record store.

    Document numbers are not required to be unique.
    """

    def __init__(self, store: BaseRecordStore) -> None:
        self._store = store

    def list_all(self) -> list[NormalizedRecord]:
        return self._store.load_all()

    def add(self, record: NormalizedRecord) -> int:
        """Append *record* and return the new number of stored records."""
        records = self._store.load_all()
        records.append(record)
        self._store.save_all(records)
        Log.info(f"Record saved, {len(records)} stored")
        return len(records)

    def delete(self, index: int) -> NormalizedRecord:
        """Remove the record at *index*, keeping the others in order.

        Raises:
            IndexError: if *index* is outside the stored sequence.
        """
        records = self._store.load_all()
        if not 0 <= index < len(records):
            raise IndexError(f"No record at index {index} ({len(records)} stored)")
        removed = records.pop(index)
        self._store.save_all(records)
        Log.info(f"Record {index} deleted, {len(records)} stored")
        return removed
