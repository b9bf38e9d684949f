# ABOUTME: The `folio paths` command for static page target enumeration.
# ABOUTME: Lists every (slug, locale) style target a static build would generate.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from folio.cli.options import CONTENT_ERRORS, content_option, echo_json, json_option
from folio.config import POSTS_PER_PAGE
from folio.content import blog, books

console = Console()

_TARGETS = ("blog", "tags", "pages", "books", "chapters")


@click.command("paths")
@click.argument("target", type=click.Choice(_TARGETS))
@click.option(
    "--page-size",
    type=click.IntRange(min=1),
    default=POSTS_PER_PAGE,
    show_default=True,
    help="Posts per listing page (pages target only).",
)
@content_option
@json_option
def paths(target: str, page_size: int, content_root: Path | None, json_output: bool) -> None:
    """List static page targets across all supported locales."""
    try:
        if target == "blog":
            records = blog.list_all_slugs(root=content_root)
        elif target == "tags":
            records = blog.list_all_tag_paths(root=content_root)
        elif target == "pages":
            records = blog.list_page_paths(page_size, root=content_root)
        elif target == "books":
            records = books.list_all_slugs(root=content_root)
        else:
            records = books.list_all_chapter_paths(root=content_root)
    except CONTENT_ERRORS as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    rows = [record.to_dict() for record in records]

    if json_output:
        echo_json(rows)
        return

    if not rows:
        console.print(f"[yellow]No {target} paths found.[/yellow]")
        return

    table = Table()
    for column in rows[0]:
        table.add_column(column, style="cyan" if column == "locale" else None)
    for row in rows:
        table.add_row(*(str(value) for value in row.values()))

    console.print(table)
    console.print(f"\n[dim]{len(rows)} path(s)[/dim]")
