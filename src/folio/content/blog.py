# ABOUTME: Blog query functions over content/blog/<locale>/<slug>.md.
# ABOUTME: Listing, single-post fetch, tag indexes, pagination, and static path enumeration.

import math
from pathlib import Path

from folio.config import BLOG_KIND, MARKDOWN_SUFFIX, POSTS_PER_PAGE, SUPPORTED_LOCALES
from folio.content.schema import post_meta_from_front_matter, read_front_matter
from folio.content.store import locale_dir, markdown_files, slug_for
from folio.content.tags import (
    count_tags,
    encode_tag,
    sorted_tag_counts,
    unique_sorted_tags,
)
from folio.content.types import (
    BlogPost,
    BlogPostMeta,
    PagePath,
    PostPage,
    SlugPath,
    TagCount,
    TagPath,
)
from folio.formats.markdown import render_markdown


def list_posts(locale: str, *, root: Path | None = None) -> list[BlogPostMeta]:
    """List post metadata for a locale, newest first.

    Only front-matter is parsed; bodies are not rendered. A locale with no
    directory yields an empty list.
    """
    posts = []
    for path in markdown_files(locale_dir(BLOG_KIND, locale, root)):
        data, _body = read_front_matter(path)
        posts.append(post_meta_from_front_matter(data, slug_for(path), locale, path))

    # ISO dates sort chronologically as plain strings
    return sorted(posts, key=lambda post: post.date, reverse=True)


def get_post(slug: str, locale: str, *, root: Path | None = None) -> BlogPost | None:
    """Fetch a single post with its body rendered to HTML, or None if absent."""
    path = locale_dir(BLOG_KIND, locale, root) / f"{slug}{MARKDOWN_SUFFIX}"
    if not path.is_file():
        return None

    data, body = read_front_matter(path)
    meta = post_meta_from_front_matter(data, slug, locale, path)
    return BlogPost(
        slug=meta.slug,
        title=meta.title,
        date=meta.date,
        excerpt=meta.excerpt,
        locale=meta.locale,
        updated_date=meta.updated_date,
        tags=meta.tags,
        author=meta.author,
        content=render_markdown(body),
    )


def list_all_slugs(*, root: Path | None = None) -> list[SlugPath]:
    """Every (slug, locale) pair across the supported locales."""
    return [
        SlugPath(slug=slug_for(path), locale=locale)
        for locale in SUPPORTED_LOCALES
        for path in markdown_files(locale_dir(BLOG_KIND, locale, root))
    ]


def list_tags(locale: str, *, root: Path | None = None) -> list[str]:
    """Distinct tags used by a locale's posts, alphabetically sorted."""
    return unique_sorted_tags(post.tags for post in list_posts(locale, root=root))


def list_posts_by_tag(tag: str, locale: str, *, root: Path | None = None) -> list[BlogPostMeta]:
    """Posts carrying ``tag`` exactly (case-sensitive, no normalisation)."""
    return [post for post in list_posts(locale, root=root) if tag in post.tags]


def tag_counts(locale: str, *, root: Path | None = None) -> list[TagCount]:
    """Per-locale tag counts, alphabetically by tag."""
    return sorted_tag_counts(count_tags(post.tags for post in list_posts(locale, root=root)))


def tag_counts_across_locales(*, root: Path | None = None) -> dict[str, int]:
    """Tag occurrence counts summed over every supported locale.

    The same post tagged in two locales counts twice.
    """
    return count_tags(
        post.tags
        for locale in SUPPORTED_LOCALES
        for post in list_posts(locale, root=root)
    )


def list_all_tag_paths(*, root: Path | None = None) -> list[TagPath]:
    """Percent-encoded (tag, locale) pairs for tag-filter page generation."""
    return [
        TagPath(tag=encode_tag(tag), locale=locale)
        for locale in SUPPORTED_LOCALES
        for tag in list_tags(locale, root=root)
    ]


def total_pages(post_count: int, page_size: int) -> int:
    """Number of pages needed to show ``post_count`` posts.

    Raises:
        ValueError: If page_size is not positive.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return math.ceil(post_count / page_size)


def page_window(posts: list[BlogPostMeta], page: int, page_size: int) -> PostPage:
    """Slice an already-sorted post list into its 1-based ``page`` window."""
    pages = total_pages(len(posts), page_size)
    if page < 1:
        return PostPage(posts=[], total_pages=pages)

    start = (page - 1) * page_size
    return PostPage(posts=posts[start : start + page_size], total_pages=pages)


def paginate_posts(
    locale: str,
    page: int,
    page_size: int = POSTS_PER_PAGE,
    *,
    root: Path | None = None,
) -> PostPage:
    """Return the 1-based ``page`` window of the date-sorted listing.

    Pages outside 1..total_pages give an empty ``posts`` list; deciding
    whether that is a 404 is up to the caller.
    """
    return page_window(list_posts(locale, root=root), page, page_size)


def list_page_paths(
    page_size: int = POSTS_PER_PAGE, *, root: Path | None = None
) -> list[PagePath]:
    """Listing pages 2..N for every supported locale. Page 1 is the blog index."""
    paths = []
    for locale in SUPPORTED_LOCALES:
        pages = total_pages(len(list_posts(locale, root=root)), page_size)
        paths.extend(PagePath(page=page, locale=locale) for page in range(2, pages + 1))
    return paths
