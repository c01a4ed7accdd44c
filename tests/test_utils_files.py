"""Tests for file utility functions."""

from __future__ import annotations

from pathlib import Path

import pytest

from markboost.config import DEFAULT_IGNORE_PATTERNS
from markboost.utils.files import is_ignored, iter_markdown_files, matches_pattern


def _touch(path: Path, text: str = "content") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestIterMarkdownFiles:
    """Test iter_markdown_files function."""

    def test_finds_nested_markdown(self, tmp_path: Path) -> None:
        """Should find Markdown files in nested directories."""
        _touch(tmp_path / "root.md")
        _touch(tmp_path / "sub" / "nested.md")
        _touch(tmp_path / "sub" / "notes.txt")

        files = list(iter_markdown_files(tmp_path))

        assert [f.relative_path for f in files] == ["root.md", "sub/nested.md"]

    def test_record_fields(self, tmp_path: Path) -> None:
        """Should report absolute path, mtime and filename."""
        path = _touch(tmp_path / "folder" / "My Note.md")

        (record,) = list(iter_markdown_files(tmp_path))

        assert record.absolute_path == path
        assert record.filename == "My Note.md"
        assert record.mtime == pytest.approx(path.stat().st_mtime)

    def test_default_ignores(self, tmp_path: Path) -> None:
        """Should skip dependency folders and dotfiles with the default patterns."""
        _touch(tmp_path / "keep.md")
        _touch(tmp_path / "node_modules" / "pkg" / "README.md")
        _touch(tmp_path / "docs" / "node_modules" / "x.md")
        _touch(tmp_path / ".obsidian" / "workspace.md")
        _touch(tmp_path / "docs" / ".draft.md")

        files = list(iter_markdown_files(tmp_path, DEFAULT_IGNORE_PATTERNS))

        assert [f.relative_path for f in files] == ["keep.md"]

    def test_directory_named_like_markdown(self, tmp_path: Path) -> None:
        """Should skip directories ending in .md."""
        (tmp_path / "folder.md").mkdir()
        _touch(tmp_path / "folder.md" / "inner.md")

        files = list(iter_markdown_files(tmp_path))

        assert [f.relative_path for f in files] == ["folder.md/inner.md"]

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert list(iter_markdown_files(tmp_path)) == []


class TestIgnorePatterns:
    """Test glob-style ignore matching."""

    @pytest.mark.parametrize(
        ("path", "pattern", "expected"),
        [
            ("node_modules/a.md", "**/node_modules/**", True),
            ("a/b/node_modules/c.md", "**/node_modules/**", True),
            ("a/node_modules.md", "**/node_modules/**", False),
            (".git/HEAD.md", "**/.*", True),
            ("notes/.hidden.md", "**/.*", True),
            ("notes/visible.md", "**/.*", False),
            ("drafts/wip.md", "drafts/*", True),
            ("published/wip.md", "drafts/*", False),
            ("drafts/x.md", "drafts/*.md", True),
            ("drafts/sub/x.md", "drafts/*.md", False),
            ("drafts/sub/x.md", "drafts/**", True),
            ("archive/old/x.md", "archive", True),
            ("notes/a1.md", "notes/a?.md", True),
            ("notes/a/b.md", "notes/a?b.md", False),
        ],
    )
    def test_matches_pattern(self, path: str, pattern: str, expected: bool) -> None:
        assert matches_pattern(path, pattern) is expected

    def test_is_ignored_any_pattern(self) -> None:
        assert is_ignored("drafts/a.md", ["x/*", "drafts/*"])
        assert not is_ignored("drafts/a.md", [])
