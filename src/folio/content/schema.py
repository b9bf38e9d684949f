# ABOUTME: Parse boundary between raw front-matter/JSON and typed content records.
# ABOUTME: Declares required vs optional fields and applies defaults in one place.

import json
from datetime import date
from pathlib import Path
from typing import Any

import frontmatter

from folio.content.types import BlogPostMeta, BookChapter, BookMeta


class FrontMatterError(ValueError):
    """Raised when a content file is missing a required field or has a bad field shape."""


def read_front_matter(path: Path) -> tuple[dict[str, Any], str]:
    """Split a Markdown file into (front-matter mapping, Markdown body).

    YAML syntax errors from the front-matter block propagate unchanged.
    """
    post = frontmatter.load(str(path))
    return dict(post.metadata), post.content


def read_book_json(path: Path) -> dict[str, Any]:
    """Load a book's meta.json. Invalid JSON raises json.JSONDecodeError."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise FrontMatterError(f"{path}: expected a JSON object")
    return data


def _as_text(value: Any) -> str:
    # YAML turns bare dates into date/datetime objects
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def _required(data: dict[str, Any], key: str, source: Path | str) -> str:
    value = data.get(key)
    if value is None or value == "":
        raise FrontMatterError(f"{source}: missing required field '{key}'")
    return _as_text(value)


def _optional(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None or value == "":
        return None
    return _as_text(value)


def _tags(data: dict[str, Any], source: Path | str) -> list[str]:
    value = data.get("tags")
    if not value:
        return []
    if not isinstance(value, list):
        raise FrontMatterError(f"{source}: 'tags' must be a list, got {type(value).__name__}")
    if not all(isinstance(tag, str) for tag in value):
        raise FrontMatterError(f"{source}: 'tags' must be a list of strings")
    return list(value)


def _order(data: dict[str, Any], source: Path | str) -> int | None:
    value = data.get("order")
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise FrontMatterError(f"{source}: 'order' must be an integer")
    return value


def post_meta_from_front_matter(
    data: dict[str, Any], slug: str, locale: str, source: Path | str
) -> BlogPostMeta:
    """Build BlogPostMeta from a post's front-matter mapping."""
    return BlogPostMeta(
        slug=slug,
        title=_required(data, "title", source),
        date=_required(data, "date", source),
        excerpt=_required(data, "excerpt", source),
        locale=locale,
        updated_date=_optional(data, "updatedDate"),
        tags=_tags(data, source),
        author=_optional(data, "author"),
    )


def book_meta_from_json(
    data: dict[str, Any], slug: str, locale: str, chapter_count: int, source: Path | str
) -> BookMeta:
    """Build BookMeta from a meta.json mapping. ``id`` falls back to the directory slug."""
    return BookMeta(
        id=_optional(data, "id") or slug,
        slug=slug,
        title=_required(data, "title", source),
        author=_required(data, "author", source),
        description=_required(data, "description", source),
        published_date=_required(data, "publishedDate", source),
        locale=locale,
        subtitle=_optional(data, "subtitle"),
        updated_date=_optional(data, "updatedDate"),
        cover_image=_optional(data, "coverImage"),
        tags=_tags(data, source),
        chapter_count=chapter_count,
    )


def chapter_from_front_matter(
    data: dict[str, Any],
    slug: str,
    default_order: int,
    source: Path | str,
    content: str | None = None,
) -> BookChapter:
    """Build a BookChapter. ``default_order`` applies when front-matter has no ``order``."""
    order = _order(data, source)
    return BookChapter(
        id=_optional(data, "id") or slug,
        slug=slug,
        title=_required(data, "title", source),
        order=default_order if order is None else order,
        content=content,
    )
