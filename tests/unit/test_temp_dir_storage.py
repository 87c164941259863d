import re
from pathlib import Path

import pytest

from app.storage.temp_dir_storage import TempDirStorage, scratch_file_name


class TestScratchFileName:
    def test_keeps_lowercased_extension(self) -> None:
        assert scratch_file_name("Scan.PNG").endswith(".png")

    def test_has_timestamp_and_random_component(self) -> None:
        name = scratch_file_name("a.pdf")
        assert re.fullmatch(r"\d{8}T\d{12}-[0-9a-f]{32}\.pdf", name)

    def test_names_do_not_collide(self) -> None:
        names = {scratch_file_name("a.pdf") for _ in range(200)}
        assert len(names) == 200

    def test_no_extension_without_filename(self) -> None:
        assert "." not in scratch_file_name("")


class TestSession:
    def test_save_and_read_roundtrip(self, tmp_path: Path) -> None:
        with TempDirStorage.session(tmp_path) as storage:
            key = storage.save(b"%PDF test content", "doc.pdf")
            assert storage.read(key) == b"%PDF test content"

    def test_directory_removed_after_scope(self, tmp_path: Path) -> None:
        with TempDirStorage.session(tmp_path) as storage:
            storage.save(b"data", "doc.pdf")
            directory = storage.directory
            assert directory.exists()
        assert not directory.exists()
        assert list(tmp_path.iterdir()) == []

    def test_directory_removed_when_block_raises(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError):
            with TempDirStorage.session(tmp_path) as storage:
                storage.save(b"data", "doc.pdf")
                directory = storage.directory
                raise RuntimeError("boom")
        assert not directory.exists()

    def test_concurrent_sessions_are_isolated(self, tmp_path: Path) -> None:
        with TempDirStorage.session(tmp_path) as first, TempDirStorage.session(tmp_path) as second:
            assert first.directory != second.directory

    def test_creates_missing_root(self, tmp_path: Path) -> None:
        root = tmp_path / "nested" / "scratch"
        with TempDirStorage.session(root) as storage:
            assert storage.directory.parent == root


class TestReadDelete:
    def test_read_missing_key_raises(self, tmp_path: Path) -> None:
        storage = TempDirStorage(tmp_path)
        with pytest.raises(FileNotFoundError, match="missing.pdf"):
            storage.read("missing.pdf")

    def test_delete_removes_file(self, tmp_path: Path) -> None:
        storage = TempDirStorage(tmp_path)
        key = storage.save(b"data", "a.png")
        storage.delete(key)
        with pytest.raises(FileNotFoundError):
            storage.read(key)

    def test_delete_missing_key_is_ignored(self, tmp_path: Path) -> None:
        TempDirStorage(tmp_path).delete("nothing-here")

    def test_keys_cannot_escape_directory(self, tmp_path: Path) -> None:
        inner = tmp_path / "inner"
        inner.mkdir()
        (tmp_path / "secret.txt").write_bytes(b"secret")
        storage = TempDirStorage(inner)
        with pytest.raises(FileNotFoundError):
            storage.read("../secret.txt")
