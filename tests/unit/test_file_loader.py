from pathlib import Path

import pytest

from remitscan.content.file_loader import FileLoader


class TestFileLoader:
    def test_loads_name_and_mime(self, tmp_path: Path) -> None:
        path = tmp_path / "invoice.pdf"
        path.write_bytes(b"%PDF-1.4")
        file = FileLoader().load(path)
        assert file.name == "invoice.pdf"
        assert file.mime_type == "application/pdf"
        assert file.path == path

    def test_accepts_string_path(self, tmp_path: Path) -> None:
        path = tmp_path / "notes.txt"
        path.write_text("hello")
        file = FileLoader().load(str(path))
        assert file.read_bytes() == b"hello"

    def test_unknown_extension_has_empty_mime(self, tmp_path: Path) -> None:
        path = tmp_path / "blob.zzzunknown"
        path.write_bytes(b"x")
        assert FileLoader().load(path).mime_type == ""

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="File not found"):
            FileLoader().load(tmp_path / "missing.pdf")

    def test_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            FileLoader().load(tmp_path)

    def test_load_many_keeps_order(self, tmp_path: Path) -> None:
        paths = []
        for name in ("b.txt", "a.txt"):
            path = tmp_path / name
            path.write_text(name)
            paths.append(path)
        files = FileLoader().load_many(paths)
        assert [f.name for f in files] == ["b.txt", "a.txt"]
