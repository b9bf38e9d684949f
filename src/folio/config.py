# ABOUTME: Site-wide configuration for the folio content layer.
# ABOUTME: Holds the supported locale list, content layout names, and defaults.

from pathlib import Path

# Every locale-enumerating function reads this tuple and nothing else.
SUPPORTED_LOCALES: tuple[str, ...] = ("en", "ja", "ko", "zh", "es", "fr")
DEFAULT_LOCALE = "en"

DEFAULT_CONTENT_ROOT = Path("content")

BLOG_KIND = "blog"
BOOKS_KIND = "books"

MARKDOWN_SUFFIX = ".md"
BOOK_META_FILENAME = "meta.json"
CHAPTERS_DIRNAME = "chapters"

POSTS_PER_PAGE = 10


def resolve_root(root: Path | None) -> Path:
    """Return the content root to read from, falling back to ./content."""
    return root if root is not None else DEFAULT_CONTENT_ROOT
