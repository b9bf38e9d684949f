# ABOUTME: Tag aggregation shared by the blog and books query modules.
# ABOUTME: Deduplicated tag lists, tag counts, and URL-safe tag slugs.

from collections import Counter
from collections.abc import Iterable
from urllib.parse import quote, unquote

from folio.content.types import TagCount

# Characters JavaScript's encodeURIComponent leaves untouched besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_tag(tag: str) -> str:
    """Percent-encode a tag for use as a single URL path segment."""
    return quote(tag, safe=_URI_COMPONENT_SAFE)


def decode_tag(slug: str) -> str:
    """Inverse of encode_tag."""
    return unquote(slug)


def unique_sorted_tags(tag_lists: Iterable[list[str]]) -> list[str]:
    """Flatten tag lists, drop duplicates, and sort alphabetically."""
    return sorted({tag for tags in tag_lists for tag in tags})


def count_tags(tag_lists: Iterable[list[str]]) -> dict[str, int]:
    """Count how many entries carry each tag."""
    counter: Counter[str] = Counter()
    for tags in tag_lists:
        counter.update(tags)
    return dict(counter)


def sorted_tag_counts(counts: dict[str, int]) -> list[TagCount]:
    """Tag counts as records, alphabetically by tag."""
    return [TagCount(tag=tag, count=counts[tag]) for tag in sorted(counts)]
