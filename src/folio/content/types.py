# ABOUTME: Record types returned by the blog and books query functions.
# ABOUTME: Plain dataclasses with to_dict() helpers using the camelCase wire keys.

from dataclasses import dataclass, field
from typing import Any


@dataclass
class BlogPostMeta:
    """Listing metadata for one Markdown post under content/blog/<locale>/."""

    slug: str
    title: str
    date: str
    excerpt: str
    locale: str
    updated_date: str | None = None
    tags: list[str] = field(default_factory=list)
    author: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "slug": self.slug,
            "title": self.title,
            "date": self.date,
            "excerpt": self.excerpt,
            "tags": list(self.tags),
            "author": self.author,
            "locale": self.locale,
        }
        if self.updated_date is not None:
            data["updatedDate"] = self.updated_date
        return data


@dataclass
class BlogPost(BlogPostMeta):
    """A post with its body rendered to HTML."""

    content: str = ""

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["content"] = self.content
        return data


@dataclass
class BookChapter:
    """One chapter file of a book.

    ``content`` is only filled in by the single-chapter fetch; chapter stubs
    listed as part of a Book carry None.
    """

    id: str
    slug: str
    title: str
    order: int
    content: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "slug": self.slug,
            "title": self.title,
            "order": self.order,
        }
        if self.content is not None:
            data["content"] = self.content
        return data


@dataclass
class _BookFields:
    id: str
    slug: str
    title: str
    author: str
    description: str
    published_date: str
    locale: str
    subtitle: str | None = None
    updated_date: str | None = None
    cover_image: str | None = None
    tags: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "slug": self.slug,
            "title": self.title,
            "author": self.author,
            "publishedDate": self.published_date,
            "description": self.description,
            "coverImage": self.cover_image,
            "tags": list(self.tags),
            "locale": self.locale,
        }
        if self.subtitle is not None:
            data["subtitle"] = self.subtitle
        if self.updated_date is not None:
            data["updatedDate"] = self.updated_date
        return data


@dataclass
class BookMeta(_BookFields):
    """Listing metadata for one book directory, with its chapter count."""

    chapter_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["chapterCount"] = self.chapter_count
        return data


@dataclass
class Book(_BookFields):
    """A book with its ordered chapter stubs (no chapter bodies)."""

    chapters: list[BookChapter] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["chapters"] = [chapter.to_dict() for chapter in self.chapters]
        return data


@dataclass
class SlugPath:
    """A (slug, locale) pair for static page generation."""

    slug: str
    locale: str

    def to_dict(self) -> dict[str, Any]:
        return {"slug": self.slug, "locale": self.locale}


@dataclass
class ChapterPath:
    book_slug: str
    chapter_slug: str
    locale: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "bookSlug": self.book_slug,
            "chapterSlug": self.chapter_slug,
            "locale": self.locale,
        }


@dataclass
class TagPath:
    """A tag-filter page target. ``tag`` is already percent-encoded."""

    tag: str
    locale: str

    def to_dict(self) -> dict[str, Any]:
        return {"tag": self.tag, "locale": self.locale}


@dataclass
class PagePath:
    page: int
    locale: str

    def to_dict(self) -> dict[str, Any]:
        return {"page": self.page, "locale": self.locale}


@dataclass
class TagCount:
    tag: str
    count: int

    def to_dict(self) -> dict[str, Any]:
        return {"tag": self.tag, "count": self.count}


@dataclass
class PostPage:
    """One window of the date-sorted post listing."""

    posts: list[BlogPostMeta]
    total_pages: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "posts": [post.to_dict() for post in self.posts],
            "totalPages": self.total_pages,
        }
