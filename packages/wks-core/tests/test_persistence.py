"""Tests for storage roots and the JSON key-value store."""
import json

import pytest

from wks_core.errors import InvalidKeyError
from wks_core.persistence import (
    FileStorageRoot,
    InMemoryStorageRoot,
    JsonKVStore,
    get_wks_home,
)


# ═══════════════════════════════════════════════════════════════════════════
# Storage roots
# ═══════════════════════════════════════════════════════════════════════════

class TestFileStorageRoot:
    def test_write_and_read(self, tmp_path):
        storage = FileStorageRoot()
        storage.write_text(tmp_path / "a.txt", "hello")
        assert storage.read_text(tmp_path / "a.txt") == "hello"
        assert storage.exists(tmp_path / "a.txt")
        assert not storage.is_dir(tmp_path / "a.txt")

    def test_list_files_skips_directories(self, tmp_path):
        (tmp_path / "b.json").write_text("{}")
        (tmp_path / "a.json").write_text("{}")
        (tmp_path / "sub").mkdir()
        assert FileStorageRoot().list_files(tmp_path) == ["a.json", "b.json"]

    def test_list_missing_directory_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            FileStorageRoot().list_files(tmp_path / "missing")

    def test_write_into_missing_directory_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            FileStorageRoot().write_text(tmp_path / "missing" / "a.json", "{}")

    def test_relative_paths_use_base_dir(self, tmp_path):
        storage = FileStorageRoot(base_dir=tmp_path)
        storage.make_dirs("x/y")
        storage.write_text("x/y/z.txt", "data")
        assert (tmp_path / "x" / "y" / "z.txt").read_text() == "data"

    def test_make_dir_requires_parent(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            FileStorageRoot().make_dir(tmp_path / "a" / "b")


class TestInMemoryStorageRoot:
    def test_make_dirs_and_write(self):
        storage = InMemoryStorageRoot()
        storage.make_dirs("/data/docs")
        storage.write_text("/data/docs/a.json", "{}")
        assert storage.is_dir("/data")
        assert storage.exists("/data/docs/a.json")
        assert storage.list_files("/data/docs") == ["a.json"]

    def test_list_files_only_direct_children(self):
        storage = InMemoryStorageRoot()
        storage.make_dirs("/d/sub")
        storage.write_text("/d/top.json", "1")
        storage.write_text("/d/sub/deep.json", "2")
        assert storage.list_files("/d") == ["top.json"]

    def test_missing_directory(self):
        storage = InMemoryStorageRoot()
        with pytest.raises(FileNotFoundError):
            storage.list_files("/nope")
        with pytest.raises(FileNotFoundError):
            storage.write_text("/nope/a.json", "{}")

    def test_make_dir_twice_raises(self):
        storage = InMemoryStorageRoot()
        storage.make_dir("/d")
        with pytest.raises(FileExistsError):
            storage.make_dir("/d")

    def test_read_missing_file(self):
        with pytest.raises(FileNotFoundError):
            InMemoryStorageRoot().read_text("/a.json")


# ═══════════════════════════════════════════════════════════════════════════
# Key-value store
# ═══════════════════════════════════════════════════════════════════════════

class TestJsonKVStore:
    def test_get_missing_returns_none(self, tmp_path):
        assert JsonKVStore().get("absent", tmp_path) is None

    def test_set_creates_directory(self, tmp_path):
        kv = JsonKVStore()
        kv.set("doc", tmp_path / "nested" / "dir", {"a": 1})
        assert json.loads((tmp_path / "nested" / "dir" / "doc.json").read_text()) == {"a": 1}

    def test_compact_by_default(self, tmp_path):
        JsonKVStore().set("doc", tmp_path, {"a": 1, "b": [1, 2]})
        assert (tmp_path / "doc.json").read_text() == '{"a":1,"b":[1,2]}'

    def test_pretty_print(self, tmp_path):
        JsonKVStore().set("doc", tmp_path, {"a": 1}, pretty_print=True)
        assert (tmp_path / "doc.json").read_text() == '{\n  "a": 1\n}'

    def test_key_with_json_extension(self, tmp_path):
        kv = JsonKVStore()
        kv.set("doc.json", tmp_path, {"a": 1})
        assert (tmp_path / "doc.json").exists()
        assert kv.get("doc", tmp_path) == {"a": 1}

    def test_malformed_raises(self, tmp_path):
        (tmp_path / "doc.json").write_text("{not json")
        with pytest.raises(json.JSONDecodeError):
            JsonKVStore().get("doc", tmp_path)

    def test_empty_file_raises(self, tmp_path):
        (tmp_path / "doc.json").write_text("")
        with pytest.raises(ValueError):
            JsonKVStore().get("doc", tmp_path)

    def test_empty_key_rejected(self, tmp_path):
        with pytest.raises(InvalidKeyError):
            JsonKVStore().get("", tmp_path)

    def test_in_memory_backend(self):
        kv = JsonKVStore(InMemoryStorageRoot())
        kv.set("doc", "/data", {"x": True})
        assert kv.get("doc", "/data") == {"x": True}


def test_wks_home_env(monkeypatch, tmp_path):
    monkeypatch.setenv("WKS_HOME", str(tmp_path))
    assert get_wks_home() == tmp_path
    monkeypatch.delenv("WKS_HOME")
    assert get_wks_home().name == ".wks"
