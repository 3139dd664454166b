"""
Unit tests for folder text sources.
"""

import asyncio

import pytest

from folderstats.domain.exceptions import FolderNotFoundError
from folderstats.infrastructure.sources import PlaceholderTextSource, FileSystemTextSource


def test_placeholder_text():
    """Placeholder embeds the folder name."""
    source = PlaceholderTextSource()

    assert asyncio.run(source.resolve("A")) == "Text data from A"
    assert asyncio.run(source.resolve("")) == "Text data from "


class TestFileSystemTextSource:
    """Test reading folder text from disk."""

    def test_reads_text_files_in_name_order(self, tmp_path):
        folder = tmp_path / "reviews"
        folder.mkdir()
        (folder / "b.txt").write_text("second", encoding="utf-8")
        (folder / "a.txt").write_text("first", encoding="utf-8")
        (folder / "notes.md").write_text("ignored", encoding="utf-8")

        source = FileSystemTextSource(tmp_path)

        assert asyncio.run(source.resolve("reviews")) == "first\nsecond"

    def test_does_not_recurse(self, tmp_path):
        folder = tmp_path / "top"
        (folder / "nested").mkdir(parents=True)
        (folder / "nested" / "deep.txt").write_text("deep", encoding="utf-8")
        (folder / "top.txt").write_text("top", encoding="utf-8")

        assert FileSystemTextSource(tmp_path).read_folder("top") == "top"

    def test_empty_folder(self, tmp_path):
        (tmp_path / "empty").mkdir()

        assert FileSystemTextSource(tmp_path).read_folder("empty") == ""

    def test_custom_pattern(self, tmp_path):
        folder = tmp_path / "docs"
        folder.mkdir()
        (folder / "a.md").write_text("markdown", encoding="utf-8")
        (folder / "b.txt").write_text("text", encoding="utf-8")

        source = FileSystemTextSource(tmp_path, pattern="*.md")

        assert source.read_folder("docs") == "markdown"

    def test_missing_folder_raises(self, tmp_path):
        source = FileSystemTextSource(tmp_path)

        with pytest.raises(FolderNotFoundError, match="does not exist"):
            asyncio.run(source.resolve("missing"))

    def test_file_instead_of_folder_raises(self, tmp_path):
        (tmp_path / "file.txt").write_text("x", encoding="utf-8")

        with pytest.raises(FolderNotFoundError):
            FileSystemTextSource(tmp_path).read_folder("file.txt")

    def test_parent_traversal_is_rejected(self, tmp_path):
        root = tmp_path / "root"
        root.mkdir()
        (tmp_path / "secret").mkdir()
        (tmp_path / "secret" / "x.txt").write_text("leaked", encoding="utf-8")

        with pytest.raises(FolderNotFoundError):
            asyncio.run(FileSystemTextSource(root).resolve("../secret"))

    def test_absolute_folder_is_rejected(self, tmp_path):
        root = tmp_path / "root"
        root.mkdir()
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "x.txt").write_text("leaked", encoding="utf-8")

        with pytest.raises(FolderNotFoundError):
            FileSystemTextSource(root).read_folder(str(outside))

    def test_nested_folder_inside_root(self, tmp_path):
        (tmp_path / "2024" / "March").mkdir(parents=True)
        (tmp_path / "2024" / "March" / "a.txt").write_text("nested", encoding="utf-8")

        assert FileSystemTextSource(tmp_path).read_folder("2024/March") == "nested"
