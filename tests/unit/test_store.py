# ABOUTME: Unit tests for the content layout helpers.
# ABOUTME: Tests locale directory lookup, Markdown enumeration, and the valid-book filter.

from pathlib import Path

from folio.config import DEFAULT_CONTENT_ROOT
from folio.content.store import (
    filter_valid_book_dirs,
    locale_dir,
    markdown_files,
    slug_for,
)


class TestLocaleDir:
    def test_joins_kind_and_locale(self, tmp_path: Path):
        assert locale_dir("blog", "ja", tmp_path) == tmp_path / "blog" / "ja"

    def test_defaults_to_content_root(self):
        assert locale_dir("books", "en") == DEFAULT_CONTENT_ROOT / "books" / "en"


class TestMarkdownFiles:
    def test_only_markdown_files(self, tmp_path: Path):
        (tmp_path / "b.md").write_text("x")
        (tmp_path / "a.md").write_text("x")
        (tmp_path / "c.txt").write_text("x")
        (tmp_path / "sub.md").mkdir()

        assert [p.name for p in markdown_files(tmp_path)] == ["a.md", "b.md"]

    def test_missing_directory(self, tmp_path: Path):
        assert markdown_files(tmp_path / "missing") == []

    def test_slug_strips_extension(self):
        assert slug_for(Path("/x/my-post.md")) == "my-post"
        assert slug_for(Path("/x/v1.2.md")) == "v1.2"


class TestFilterValidBookDirs:
    """filter_valid_book_dirs should keep only directories with meta.json."""

    def test_excludes_drafts(self, tmp_path: Path):
        (tmp_path / "real").mkdir()
        (tmp_path / "real" / "meta.json").write_text("{}")
        (tmp_path / "draft" / "chapters").mkdir(parents=True)
        (tmp_path / "stray.json").write_text("{}")

        assert [p.name for p in filter_valid_book_dirs(tmp_path)] == ["real"]

    def test_missing_locale_directory(self, tmp_path: Path):
        assert filter_valid_book_dirs(tmp_path / "fr") == []
