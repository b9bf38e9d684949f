# ABOUTME: Unit tests for content record dataclasses.
# ABOUTME: Validates to_dict() wire keys and optional-field handling.

from folio.content.types import (
    BlogPost,
    BlogPostMeta,
    Book,
    BookChapter,
    BookMeta,
    ChapterPath,
    PostPage,
)


class TestBlogRecords:
    def test_meta_to_dict_omits_missing_updated_date(self):
        meta = BlogPostMeta(slug="s", title="T", date="2024-01-01", excerpt="E", locale="en")
        data = meta.to_dict()
        assert "updatedDate" not in data
        assert data["tags"] == []
        assert data["author"] is None

    def test_post_to_dict_includes_content(self):
        post = BlogPost(
            slug="s", title="T", date="2024-01-01", excerpt="E", locale="en",
            updated_date="2024-02-01", content="<p>x</p>",
        )
        data = post.to_dict()
        assert data["updatedDate"] == "2024-02-01"
        assert data["content"] == "<p>x</p>"

    def test_post_page_to_dict(self):
        page = PostPage(posts=[], total_pages=3)
        assert page.to_dict() == {"posts": [], "totalPages": 3}


class TestBookRecords:
    def _fields(self):
        return {
            "id": "b",
            "slug": "b",
            "title": "T",
            "author": "A",
            "description": "D",
            "published_date": "2024-01-01",
            "locale": "en",
        }

    def test_book_meta_camel_case_keys(self):
        data = BookMeta(**self._fields(), chapter_count=2).to_dict()
        assert data["publishedDate"] == "2024-01-01"
        assert data["chapterCount"] == 2
        assert data["coverImage"] is None
        assert "subtitle" not in data

    def test_book_nests_chapters(self):
        chapter = BookChapter(id="c", slug="c", title="C", order=1)
        data = Book(**self._fields(), chapters=[chapter]).to_dict()
        assert data["chapters"] == [{"id": "c", "slug": "c", "title": "C", "order": 1}]

    def test_chapter_path_keys(self):
        path = ChapterPath(book_slug="b", chapter_slug="c", locale="ja")
        assert path.to_dict() == {"bookSlug": "b", "chapterSlug": "c", "locale": "ja"}
