import json
from pathlib import Path

import pytest

from app.config.settings import Settings
from app.records.assembler import assemble
from app.records.models import NormalizedRecord
from app.storage.exceptions import StorageError
from app.storage.factory import RecordStoreFactory
from app.storage.json_file_store import JsonFileRecordStore, store_file_path
from app.storage.memory_store import InMemoryRecordStore
from app.storage.repository import CadastroRepository
from app.validation.models import FormValues


def _record(name: str, age: int = 30) -> NormalizedRecord:
    return assemble(
        FormValues(
            name=name,
            document_number="111.444.777-35",
            birth_date="1994-01-01",
            email="ana@example.com",
            postal_code="01310-930",
        ),
        age,
    )


class TestJsonFileRecordStore:
    def test_absent_file_loads_empty(self, tmp_path: Path) -> None:
        store = JsonFileRecordStore(tmp_path, "cadastros")
        assert store.load_all() == []

    @pytest.mark.parametrize("content", ["", "   ", "{not json", "null", '{"name": "Ana"}', "42"])
    def test_corrupted_file_loads_empty(self, tmp_path: Path, content: str) -> None:
        store_file_path(tmp_path, "cadastros").write_text(content, encoding="utf-8")
        store = JsonFileRecordStore(tmp_path, "cadastros")
        assert store.load_all() == []

    def test_undecodable_bytes_load_empty(self, tmp_path: Path) -> None:
        store_file_path(tmp_path, "cadastros").write_bytes(b"\xff\xfe\x00[")
        assert JsonFileRecordStore(tmp_path, "cadastros").load_all() == []

    def test_skips_malformed_entries(self, tmp_path: Path) -> None:
        good = _record("Ana").to_dict()
        payload = [good, "oops", {"name": "Sem idade"}, good]
        store_file_path(tmp_path, "cadastros").write_text(json.dumps(payload), encoding="utf-8")
        records = JsonFileRecordStore(tmp_path, "cadastros").load_all()
        assert [r.name for r in records] == ["Ana", "Ana"]

    def test_save_then_load_keeps_order(self, tmp_path: Path) -> None:
        store = JsonFileRecordStore(tmp_path / "nested", "cadastros")
        store.save_all([_record("Ana"), _record("Bruno", 41)])
        loaded = store.load_all()
        assert [r.name for r in loaded] == ["Ana", "Bruno"]
        assert loaded[1].age == 41

    def test_file_is_named_after_storage_key(self, tmp_path: Path) -> None:
        store = JsonFileRecordStore(tmp_path, "meus_cadastros")
        store.save_all([_record("Ana")])
        assert store.path == tmp_path / "meus_cadastros.json"
        stored = json.loads(store.path.read_text(encoding="utf-8"))
        assert stored[0]["documentNumber"] == "111.444.777-35"

    def test_keeps_non_ascii_text(self, tmp_path: Path) -> None:
        store = JsonFileRecordStore(tmp_path, "cadastros")
        store.save_all([_record("Conceição")])
        assert "Conceição" in store.path.read_text(encoding="utf-8")

    def test_unwritable_location_raises_storage_error(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a directory", encoding="utf-8")
        store = JsonFileRecordStore(blocker, "cadastros")
        with pytest.raises(StorageError, match="Cannot write"):
            store.save_all([_record("Ana")])


class TestInMemoryRecordStore:
    def test_empty(self) -> None:
        assert InMemoryRecordStore().load_all() == []

    def test_corrupted_item_loads_empty(self) -> None:
        store = InMemoryRecordStore("cadastros")
        store.items["cadastros"] = "[{"
        assert store.load_all() == []

    def test_saves_under_storage_key(self) -> None:
        store = InMemoryRecordStore("chave")
        store.save_all([_record("Ana")])
        assert set(store.items) == {"chave"}
        assert store.load_all()[0].name == "Ana"


class TestCadastroRepository:
    def test_add_appends(self) -> None:
        repo = CadastroRepository(InMemoryRecordStore())
        assert repo.add(_record("Ana")) == 1
        assert repo.add(_record("Bruno")) == 2
        assert [r.name for r in repo.list_all()] == ["Ana", "Bruno"]

    def test_duplicate_document_numbers_allowed(self) -> None:
        repo = CadastroRepository(InMemoryRecordStore())
        repo.add(_record("Ana"))
        repo.add(_record("Ana"))
        assert len(repo.list_all()) == 2

    @pytest.mark.parametrize("index", [0, 2, 4])
    def test_delete_keeps_relative_order(self, index: int) -> None:
        names = ["Ana", "Bruno", "Carla", "Davi", "Elisa"]
        repo = CadastroRepository(InMemoryRecordStore())
        for name in names:
            repo.add(_record(name))

        removed = repo.delete(index)

        expected = names[:index] + names[index + 1 :]
        assert removed.name == names[index]
        assert [r.name for r in repo.list_all()] == expected

    @pytest.mark.parametrize("index", [-1, 1, 5])
    def test_delete_out_of_range_raises(self, index: int) -> None:
        repo = CadastroRepository(InMemoryRecordStore())
        repo.add(_record("Ana"))
        with pytest.raises(IndexError, match=f"index {index}"):
            repo.delete(index)
        assert len(repo.list_all()) == 1

    def test_add_over_corrupted_store_starts_fresh(self, tmp_path: Path) -> None:
        store_file_path(tmp_path, "cadastros").write_text("garbage", encoding="utf-8")
        repo = CadastroRepository(JsonFileRecordStore(tmp_path, "cadastros"))
        repo.add(_record("Ana"))
        assert [r.name for r in repo.list_all()] == ["Ana"]


class TestRecordStoreFactory:
    def test_creates_json_store_in_storage_dir(self, tmp_path: Path) -> None:
        settings = Settings(storage_dir=str(tmp_path), storage_key="cadastros")
        store = RecordStoreFactory.create(settings)
        assert isinstance(store, JsonFileRecordStore)
        assert store.path == tmp_path / "cadastros.json"

    def test_creates_memory_store_when_ephemeral(self) -> None:
        store = RecordStoreFactory.create(Settings(), ephemeral=True)
        assert isinstance(store, InMemoryRecordStore)
