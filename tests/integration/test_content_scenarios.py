# ABOUTME: Integration tests across blog, books, and gradient modules on a real content tree.
# ABOUTME: Exercises end-to-end scenarios a static site build relies on.

from pathlib import Path

from folio.config import SUPPORTED_LOCALES
from folio.content import blog, books
from folio.content.tags import decode_tag
from folio.core.gradient import GradientOptions, derive_seed, render_svg, to_data_url
from tests.fixtures.content_tree import write_book, write_post


class TestBlogScenario:
    def test_two_posts_newest_first(self, tmp_path: Path):
        write_post(tmp_path, "en", "a", title="A", date="2024-01-01", excerpt="a")
        write_post(tmp_path, "en", "b", title="B", date="2024-12-31", excerpt="b")

        assert [p.slug for p in blog.list_posts("en", root=tmp_path)] == ["b", "a"]
        assert blog.list_posts("fr", root=tmp_path) == []

    def test_every_slug_path_resolves(self, content_root: Path):
        for path in blog.list_all_slugs(root=content_root):
            assert blog.get_post(path.slug, path.locale, root=content_root) is not None

    def test_every_tag_path_has_posts(self, content_root: Path):
        for path in blog.list_all_tag_paths(root=content_root):
            tag = decode_tag(path.tag)
            assert blog.list_posts_by_tag(tag, path.locale, root=content_root)


class TestBooksScenario:
    def test_book_without_chapters(self, tmp_path: Path):
        write_book(
            tmp_path, "en", "solo",
            title="Solo", author="A", description="d", publishedDate="2024-01-01",
        )

        book = books.get_book("solo", "en", root=tmp_path)
        listed = books.list_books("en", root=tmp_path)

        assert book is not None and book.chapters == []
        assert listed[0].chapter_count == 0

    def test_every_chapter_path_resolves(self, content_root: Path):
        for path in books.list_all_chapter_paths(root=content_root):
            chapter = books.get_book_chapter(
                path.book_slug, path.chapter_slug, path.locale, root=content_root
            )
            assert chapter is not None
            assert chapter.content

    def test_missing_locales_never_raise(self, content_root: Path):
        for locale in SUPPORTED_LOCALES:
            if locale in ("en", "ja"):
                continue
            assert books.list_books(locale, root=content_root) == []
            assert books.get_book("python-basics", locale, root=content_root) is None
            assert books.list_all_tags(locale, root=content_root) == []


class TestCoverFallback:
    def test_listing_and_detail_covers_match(self, content_root: Path):
        listed = next(b for b in books.list_books("en", root=content_root) if b.slug == "python-basics")
        detail = books.get_book("python-basics", "en", root=content_root)
        assert detail is not None
        assert listed.cover_image is None

        listing_cover = to_data_url(GradientOptions(seed=derive_seed(listed.title, listed.author)))
        detail_cover = to_data_url(GradientOptions(seed=derive_seed(detail.title, detail.author)))

        assert listing_cover == detail_cover
        assert render_svg(GradientOptions(seed=derive_seed(listed.title, listed.author)))
