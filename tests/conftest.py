# ABOUTME: Shared pytest fixtures for folio tests.
# ABOUTME: Builds a small multilingual content tree (blog posts and books) under tmp_path.

from pathlib import Path

import pytest

from tests.fixtures.content_tree import write_book, write_chapter, write_post


@pytest.fixture
def empty_root(tmp_path: Path) -> Path:
    """A content root with no kind or locale directories at all."""
    root = tmp_path / "content"
    root.mkdir()
    return root


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    """Create a content tree with posts in en/ja and books in en/ja.

    Layout:
        content/
            blog/
                en/  hello-world (2024-01-01), react-native-tips (2024-06-15),
                     year-in-review (2024-12-31)
                ja/  hello-world (2024-02-01)
            books/
                en/
                    python-basics/   meta.json + 3 chapters with order 3, 1, 2
                    empty-book/      meta.json, no chapters/
                    draft-book/      chapters/ only, no meta.json
                ja/
                    python-basics/   meta.json + 1 chapter without order
    """
    root = tmp_path / "content"

    write_post(
        root, "en", "hello-world",
        "# Hello\n\nFirst post.\n",
        title="Hello World",
        date="2024-01-01",
        excerpt="The first post.",
        tags=["React", "TypeScript"],
        author="Jane Doe",
    )
    write_post(
        root, "en", "year-in-review",
        "A look back.\n",
        title="Year in Review",
        date="2024-12-31",
        updatedDate="2025-01-05",
        excerpt="What happened this year.",
        tags=["TypeScript", "Testing"],
    )
    write_post(
        root, "en", "react-native-tips",
        "```python\ndef tip():\n    return 1\n```\n",
        title="React Native Tips",
        date="2024-06-15",
        excerpt="Tips for mobile.",
        tags=["React Native"],
    )
    write_post(
        root, "ja", "hello-world",
        "こんにちは\n",
        title="ハローワールド",
        date="2024-02-01",
        excerpt="最初の投稿",
        tags=["React"],
    )

    write_book(
        root, "en", "python-basics",
        id="py-101",
        title="Python Basics",
        subtitle="From zero to scripts",
        author="Jane Doe",
        publishedDate="2024-03-01",
        description="An introduction to Python.",
        tags=["Python", "Beginner"],
    )
    write_chapter(root, "en", "python-basics", "a-functions", "## Functions\n", title="Functions", order=3)
    write_chapter(root, "en", "python-basics", "b-intro", "## Intro\n", title="Introduction", order=1)
    write_chapter(root, "en", "python-basics", "c-variables", "## Vars\n", title="Variables", order=2)

    write_book(
        root, "en", "empty-book",
        title="Coming Soon",
        author="John Roe",
        publishedDate="2024-09-10",
        description="Nothing here yet.",
        coverImage="/images/soon.png",
        tags=["Python"],
    )

    draft = root / "books" / "en" / "draft-book" / "chapters"
    draft.mkdir(parents=True)
    (draft / "one.md").write_text("---\ntitle: Draft\n---\nbody\n", encoding="utf-8")

    write_book(
        root, "ja", "python-basics",
        title="Python入門",
        author="Jane Doe",
        publishedDate="2024-04-01",
        description="Python の紹介",
    )
    write_chapter(root, "ja", "python-basics", "intro", "はじめに\n", title="はじめに")

    return root
