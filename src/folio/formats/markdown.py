# ABOUTME: Markdown-to-HTML render pipeline shared by blog posts and book chapters.
# ABOUTME: GFM-style tables, strikethrough, autolinks and Pygments-highlighted code fences.

import markdown

# Raw HTML in the source is passed through as-is: content is committed by the
# site author, never submitted by visitors.
_EXTENSIONS = [
    "tables",
    "pymdownx.superfences",
    "pymdownx.highlight",
    "pymdownx.tilde",
    "pymdownx.magiclink",
    "pymdownx.tasklist",
]

_EXTENSION_CONFIGS = {
    "pymdownx.highlight": {
        "use_pygments": True,
        "guess_lang": False,
        "css_class": "highlight",
    },
    "pymdownx.tilde": {"subscript": False},
    "pymdownx.tasklist": {"custom_checkbox": False},
}


def render_markdown(body: str) -> str:
    """Render a Markdown body (front-matter already stripped) to HTML.

    Malformed Markdown is rendered best-effort; there is no error path for
    content syntax. The same input always produces the same output.
    """
    # Markdown instances keep per-document state, so build one per call
    md = markdown.Markdown(
        extensions=_EXTENSIONS,
        extension_configs=_EXTENSION_CONFIGS,
        output_format="html",
    )
    return md.convert(body)
