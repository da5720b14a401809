from app.records.models import NormalizedRecord
from app.storage.base import BaseRecordStore
from app.storage.codec import decode_records, encode_records


class InMemoryRecordStore(BaseRecordStore):
    """Key -> serialized string map, like browser local storage."""

    def __init__(self, storage_key: str = "cadastros") -> None:
        self._storage_key = storage_key
        self.items: dict[str, str] = {}

    def load_all(self) -> list[NormalizedRecord]:
        return decode_records(self.items.get(self._storage_key), self._storage_key)

    def save_all(self, records: list[NormalizedRecord]) -> None:
        self.items[self._storage_key] = encode_records(records)
