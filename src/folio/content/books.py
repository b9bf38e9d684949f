# ABOUTME: Books query functions over content/books/<locale>/<book>/{meta.json,chapters/}.
# ABOUTME: Book listing, book + chapter tree fetch, single chapter fetch, tags, and static paths.

import logging
from datetime import datetime, timezone
from pathlib import Path

from folio.config import BOOKS_KIND, MARKDOWN_SUFFIX, SUPPORTED_LOCALES
from folio.content.schema import (
    book_meta_from_json,
    chapter_from_front_matter,
    read_book_json,
    read_front_matter,
)
from folio.content.store import (
    book_meta_path,
    chapters_dir,
    filter_valid_book_dirs,
    locale_dir,
    markdown_files,
    slug_for,
)
from folio.content.tags import count_tags, sorted_tag_counts, unique_sorted_tags
from folio.content.types import (
    Book,
    BookChapter,
    BookMeta,
    ChapterPath,
    SlugPath,
    TagCount,
)
from folio.formats.markdown import render_markdown

logger = logging.getLogger(__name__)


def _published_sort_key(book: BookMeta) -> tuple[bool, float]:
    """Sort key on the parsed publishedDate; unparseable dates sort last."""
    try:
        parsed = datetime.fromisoformat(book.published_date)
    except ValueError:
        logger.warning(
            "Book %s/%s has unparseable publishedDate %r",
            book.locale,
            book.slug,
            book.published_date,
        )
        return (False, 0.0)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return (True, parsed.timestamp())


def _read_meta(book_dir: Path, locale: str, chapter_count: int) -> BookMeta:
    meta_path = book_meta_path(book_dir)
    return book_meta_from_json(
        read_book_json(meta_path), book_dir.name, locale, chapter_count, meta_path
    )


def _read_chapter_stubs(book_dir: Path) -> list[BookChapter]:
    """Chapter front-matter for a book, sorted by ascending order.

    Chapters without an ``order`` take their 1-based position in the file
    listing.
    """
    chapters = []
    for position, path in enumerate(markdown_files(chapters_dir(book_dir)), start=1):
        data, _body = read_front_matter(path)
        chapters.append(chapter_from_front_matter(data, slug_for(path), position, path))
    return sorted(chapters, key=lambda chapter: chapter.order)


def list_books(locale: str, *, root: Path | None = None) -> list[BookMeta]:
    """List book metadata for a locale, most recently published first.

    Directories without meta.json are not books and are skipped.
    """
    books = [
        _read_meta(book_dir, locale, len(markdown_files(chapters_dir(book_dir))))
        for book_dir in filter_valid_book_dirs(locale_dir(BOOKS_KIND, locale, root))
    ]
    return sorted(books, key=_published_sort_key, reverse=True)


def get_book(slug: str, locale: str, *, root: Path | None = None) -> Book | None:
    """Fetch a book with its ordered chapter stubs, or None if it has no meta.json."""
    book_dir = locale_dir(BOOKS_KIND, locale, root) / slug
    if not book_meta_path(book_dir).is_file():
        return None

    chapters = _read_chapter_stubs(book_dir)
    meta = _read_meta(book_dir, locale, len(chapters))
    return Book(
        id=meta.id,
        slug=meta.slug,
        title=meta.title,
        author=meta.author,
        description=meta.description,
        published_date=meta.published_date,
        locale=meta.locale,
        subtitle=meta.subtitle,
        updated_date=meta.updated_date,
        cover_image=meta.cover_image,
        tags=meta.tags,
        chapters=chapters,
    )


def get_book_chapter(
    book_slug: str, chapter_slug: str, locale: str, *, root: Path | None = None
) -> BookChapter | None:
    """Fetch one chapter with its body rendered to HTML, or None if absent.

    Without book context a chapter lacking ``order`` gets 0, unlike the
    position-based default used by get_book.
    """
    path = (
        chapters_dir(locale_dir(BOOKS_KIND, locale, root) / book_slug)
        / f"{chapter_slug}{MARKDOWN_SUFFIX}"
    )
    if not path.is_file():
        return None

    data, body = read_front_matter(path)
    return chapter_from_front_matter(
        data, chapter_slug, 0, path, content=render_markdown(body)
    )


def list_all_slugs(*, root: Path | None = None) -> list[SlugPath]:
    """Every (book slug, locale) pair across the supported locales."""
    return [
        SlugPath(slug=book_dir.name, locale=locale)
        for locale in SUPPORTED_LOCALES
        for book_dir in filter_valid_book_dirs(locale_dir(BOOKS_KIND, locale, root))
    ]


def list_all_chapter_paths(*, root: Path | None = None) -> list[ChapterPath]:
    """Every (book slug, chapter slug, locale) triple across the supported locales."""
    return [
        ChapterPath(book_slug=book_dir.name, chapter_slug=slug_for(path), locale=locale)
        for locale in SUPPORTED_LOCALES
        for book_dir in filter_valid_book_dirs(locale_dir(BOOKS_KIND, locale, root))
        for path in markdown_files(chapters_dir(book_dir))
    ]


def list_books_by_tag(tag: str, locale: str, *, root: Path | None = None) -> list[BookMeta]:
    """Books carrying ``tag`` exactly (case-sensitive)."""
    return [book for book in list_books(locale, root=root) if tag in book.tags]


def list_all_tags(locale: str, *, root: Path | None = None) -> list[str]:
    """Distinct book tags for a locale, alphabetically sorted."""
    return unique_sorted_tags(book.tags for book in list_books(locale, root=root))


def book_tag_counts(locale: str, *, root: Path | None = None) -> list[TagCount]:
    """Per-locale book tag counts, alphabetically by tag."""
    return sorted_tag_counts(count_tags(book.tags for book in list_books(locale, root=root)))
