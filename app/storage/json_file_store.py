from pathlib import Path

from app.logging.logger import Log
from app.records.models import NormalizedRecord
from app.storage.base import BaseRecordStore
from app.storage.codec import decode_records, encode_records
from app.storage.exceptions import StorageError


def store_file_path(storage_dir: Path, storage_key: str) -> Path:
    """Build path to the store file: {storage_dir}/{storage_key}.json"""
    return storage_dir / f"{storage_key}.json"


class JsonFileRecordStore(BaseRecordStore):
    """Keeps the record list as a JSON array in a single file."""

    def __init__(self, storage_dir: Path, storage_key: str) -> None:
        self._path = store_file_path(storage_dir, storage_key)

    @property
    def path(self) -> Path:
        return self._path

    def load_all(self) -> list[NormalizedRecord]:
        if not self._path.exists():
            return []
        try:
            raw = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            Log.warning(f"Ignoring unreadable store {self._path}: {exc}")
            return []
        return decode_records(raw, str(self._path))

    def save_all(self, records: list[NormalizedRecord]) -> None:
        payload = encode_records(records)
        tmp_path = self._path.with_suffix(".json.tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(payload, encoding="utf-8")
            tmp_path.replace(self._path)
        except OSError as exc:
            raise StorageError(f"Cannot write {self._path}: {exc}") from exc
