# ABOUTME: The `folio books` command group for querying long-form books.
# ABOUTME: Provides ls, show, chapter, and tags subcommands over content/books/<locale>/.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from folio.cli.options import CONTENT_ERRORS, content_option, echo_json, json_option, locale_option
from folio.content import books as book_queries
from folio.core.gradient import GradientOptions, derive_seed, to_css_gradient

console = Console()


@click.group("books")
def books() -> None:
    """Query books and their chapters."""


@books.command("ls")
@locale_option
@click.option("--tag", "tag_filter", default=None, help="Only books with this exact tag.")
@content_option
@json_option
def books_ls(
    locale: str, tag_filter: str | None, content_root: Path | None, json_output: bool
) -> None:
    """List books for a locale, most recently published first."""
    try:
        if tag_filter:
            records = book_queries.list_books_by_tag(tag_filter, locale, root=content_root)
        else:
            records = book_queries.list_books(locale, root=content_root)
    except CONTENT_ERRORS as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    if json_output:
        echo_json([record.to_dict() for record in records])
        return

    if not records:
        console.print(f"[yellow]No books for locale '{locale}'.[/yellow]")
        return

    table = Table()
    table.add_column("Published", style="dim", width=10)
    table.add_column("Slug", style="cyan")
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Chapters", justify="right")

    for record in records:
        table.add_row(
            record.published_date,
            record.slug,
            record.title,
            record.author,
            str(record.chapter_count),
        )

    console.print(table)
    console.print(f"\n[dim]{len(records)} book(s)[/dim]")


@books.command("show")
@click.argument("slug")
@locale_option
@content_option
@json_option
def books_show(slug: str, locale: str, content_root: Path | None, json_output: bool) -> None:
    """Show a book's metadata and chapter list."""
    try:
        book = book_queries.get_book(slug, locale, root=content_root)
    except CONTENT_ERRORS as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    if book is None:
        console.print(f"[red]Book '{slug}' not found for locale '{locale}'.[/red]")
        raise SystemExit(1)

    if json_output:
        echo_json(book.to_dict())
        return

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=12)
    table.add_column("Value")

    table.add_row("Title", book.title)
    if book.subtitle:
        table.add_row("Subtitle", book.subtitle)
    table.add_row("Author", book.author)
    table.add_row("Published", book.published_date)
    if book.updated_date:
        table.add_row("Updated", book.updated_date)
    table.add_row("Description", book.description)
    if book.tags:
        table.add_row("Tags", ", ".join(book.tags))
    if book.cover_image:
        table.add_row("Cover", book.cover_image)
    else:
        seed = derive_seed(book.title, book.author)
        table.add_row("Cover", to_css_gradient(GradientOptions(seed=seed)))

    console.print(table)

    if not book.chapters:
        console.print("\n[dim]No chapters yet.[/dim]")
        return

    chapters = Table(title="Chapters")
    chapters.add_column("#", style="dim", justify="right")
    chapters.add_column("Slug", style="cyan")
    chapters.add_column("Title")
    for chapter in book.chapters:
        chapters.add_row(str(chapter.order), chapter.slug, chapter.title)

    console.print(chapters)


@books.command("chapter")
@click.argument("book_slug")
@click.argument("chapter_slug")
@locale_option
@content_option
@json_option
def books_chapter(
    book_slug: str,
    chapter_slug: str,
    locale: str,
    content_root: Path | None,
    json_output: bool,
) -> None:
    """Show a single chapter with its rendered HTML."""
    try:
        chapter = book_queries.get_book_chapter(
            book_slug, chapter_slug, locale, root=content_root
        )
    except CONTENT_ERRORS as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    if chapter is None:
        console.print(
            f"[red]Chapter '{chapter_slug}' of '{book_slug}' not found "
            f"for locale '{locale}'.[/red]"
        )
        raise SystemExit(1)

    if json_output:
        echo_json(chapter.to_dict())
        return

    console.print(f"[bold]{chapter.title}[/bold] [dim](order {chapter.order})[/dim]\n")
    click.echo(chapter.content)


@books.command("tags")
@locale_option
@content_option
@json_option
def books_tags(locale: str, content_root: Path | None, json_output: bool) -> None:
    """List book tags with counts."""
    try:
        counts = book_queries.book_tag_counts(locale, root=content_root)
    except CONTENT_ERRORS as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    if json_output:
        echo_json([entry.to_dict() for entry in counts])
        return

    if not counts:
        console.print("[yellow]No tags found.[/yellow]")
        return

    table = Table()
    table.add_column("Tag", style="cyan")
    table.add_column("Books", style="dim", justify="right")
    for entry in counts:
        table.add_row(entry.tag, str(entry.count))

    console.print(table)
