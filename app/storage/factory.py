from pathlib import Path

from app.config.settings import Settings
from app.storage.base import BaseRecordStore
from app.storage.json_file_store import JsonFileRecordStore
from app.storage.memory_store import InMemoryRecordStore


class RecordStoreFactory:
    """Creates the record store for the configured storage key."""

    @classmethod
    def create(cls, settings: Settings, *, ephemeral: bool = False) -> BaseRecordStore:
        if ephemeral:
            return InMemoryRecordStore(settings.storage_key)
        return JsonFileRecordStore(Path(settings.storage_dir), settings.storage_key)
