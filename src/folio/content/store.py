# ABOUTME: On-disk content layout helpers: content/<kind>/<locale>/...
# ABOUTME: Directory lookups, Markdown file enumeration, and the valid-book-directory filter.

import logging
from pathlib import Path

from folio.config import (
    BOOK_META_FILENAME,
    CHAPTERS_DIRNAME,
    MARKDOWN_SUFFIX,
    resolve_root,
)

logger = logging.getLogger(__name__)


def locale_dir(kind: str, locale: str, root: Path | None = None) -> Path:
    """Path of content/<kind>/<locale> under the content root."""
    return resolve_root(root) / kind / locale


def slug_for(path: Path) -> str:
    """Slug of a Markdown file: its filename without the .md extension."""
    return path.name[: -len(MARKDOWN_SUFFIX)]


def markdown_files(directory: Path) -> list[Path]:
    """Markdown files directly inside ``directory``, ordered by filename.

    Returns an empty list if the directory does not exist.
    """
    if not directory.is_dir():
        logger.debug("No content directory at %s", directory)
        return []
    return sorted(
        child
        for child in directory.iterdir()
        if child.is_file() and child.name.endswith(MARKDOWN_SUFFIX)
    )


def chapters_dir(book_dir: Path) -> Path:
    return book_dir / CHAPTERS_DIRNAME


def book_meta_path(book_dir: Path) -> Path:
    return book_dir / BOOK_META_FILENAME


def filter_valid_book_dirs(directory: Path) -> list[Path]:
    """Book directories under a locale directory that carry a meta.json.

    A subdirectory without meta.json is a draft: it is left out silently
    (logged at debug level), never reported as an error.
    """
    if not directory.is_dir():
        logger.debug("No content directory at %s", directory)
        return []

    valid: list[Path] = []
    for child in sorted(directory.iterdir()):
        if not child.is_dir():
            continue
        if book_meta_path(child).is_file():
            valid.append(child)
        else:
            logger.debug("Skipping %s: no %s", child, BOOK_META_FILENAME)
    return valid
