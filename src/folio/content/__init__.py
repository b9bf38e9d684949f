# ABOUTME: Content resolution package: typed queries over the content/ directory tree.
# ABOUTME: Exports the record types and the parse-boundary error.

from folio.content.schema import FrontMatterError
from folio.content.types import (
    BlogPost,
    BlogPostMeta,
    Book,
    BookChapter,
    BookMeta,
    ChapterPath,
    PagePath,
    PostPage,
    SlugPath,
    TagCount,
    TagPath,
)

__all__ = [
    "BlogPost",
    "BlogPostMeta",
    "Book",
    "BookChapter",
    "BookMeta",
    "ChapterPath",
    "FrontMatterError",
    "PagePath",
    "PostPage",
    "SlugPath",
    "TagCount",
    "TagPath",
]
