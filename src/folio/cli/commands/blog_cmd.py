# ABOUTME: The `folio blog` command group for querying blog posts.
# ABOUTME: Provides ls, show, and tags subcommands over content/blog/<locale>/.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from folio.cli.options import CONTENT_ERRORS, content_option, echo_json, json_option, locale_option
from folio.config import POSTS_PER_PAGE
from folio.content import blog as blog_queries
from folio.content.types import BlogPostMeta

console = Console()


@click.group("blog")
def blog() -> None:
    """Query blog posts."""


def _posts_table(posts: list[BlogPostMeta]) -> Table:
    table = Table()
    table.add_column("Date", style="dim", width=10)
    table.add_column("Slug", style="cyan")
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Tags")

    for post in posts:
        table.add_row(
            post.date,
            post.slug,
            post.title,
            post.author or "[dim]no author[/dim]",
            ", ".join(post.tags),
        )
    return table


@blog.command("ls")
@locale_option
@click.option("--tag", "tag_filter", default=None, help="Only posts with this exact tag.")
@click.option("--page", type=int, default=None, help="Show a single page of the listing.")
@click.option(
    "--page-size",
    type=click.IntRange(min=1),
    default=POSTS_PER_PAGE,
    show_default=True,
    help="Posts per page when --page is given.",
)
@content_option
@json_option
def blog_ls(
    locale: str,
    tag_filter: str | None,
    page: int | None,
    page_size: int,
    content_root: Path | None,
    json_output: bool,
) -> None:
    """List posts for a locale, newest first."""
    try:
        if tag_filter:
            posts = blog_queries.list_posts_by_tag(tag_filter, locale, root=content_root)
        else:
            posts = blog_queries.list_posts(locale, root=content_root)
    except CONTENT_ERRORS as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    if page is not None:
        result = blog_queries.page_window(posts, page, page_size)
        if json_output:
            echo_json(result.to_dict())
            return
        if posts and not result.posts:
            console.print(
                f"[yellow]Page {page} is outside 1..{result.total_pages} "
                f"for locale '{locale}'.[/yellow]"
            )
            return
        posts = result.posts
    elif json_output:
        echo_json([post.to_dict() for post in posts])
        return

    if not posts:
        console.print(f"[yellow]No posts for locale '{locale}'.[/yellow]")
        return

    console.print(_posts_table(posts))
    if page is not None:
        console.print(f"\n[dim]Page {page} of {result.total_pages}[/dim]")
    else:
        console.print(f"\n[dim]{len(posts)} post(s)[/dim]")


@blog.command("show")
@click.argument("slug")
@locale_option
@content_option
@json_option
def blog_show(slug: str, locale: str, content_root: Path | None, json_output: bool) -> None:
    """Show a single post with its rendered HTML."""
    try:
        post = blog_queries.get_post(slug, locale, root=content_root)
    except CONTENT_ERRORS as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    if post is None:
        console.print(f"[red]Post '{slug}' not found for locale '{locale}'.[/red]")
        raise SystemExit(1)

    if json_output:
        echo_json(post.to_dict())
        return

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=10)
    table.add_column("Value")

    table.add_row("Title", post.title)
    table.add_row("Date", post.date)
    if post.updated_date:
        table.add_row("Updated", post.updated_date)
    table.add_row("Author", post.author or "no author")
    if post.tags:
        table.add_row("Tags", ", ".join(post.tags))
    table.add_row("Excerpt", post.excerpt)

    console.print(table)
    console.print()
    # HTML is printed raw; Rich markup would mangle angle-bracketed tags
    click.echo(post.content)


@blog.command("tags")
@locale_option
@click.option(
    "--all-locales",
    is_flag=True,
    default=False,
    help="Count tags across every supported locale.",
)
@content_option
@json_option
def blog_tags(
    locale: str, all_locales: bool, content_root: Path | None, json_output: bool
) -> None:
    """List tags with post counts."""
    try:
        if all_locales:
            counts = blog_queries.tag_counts_across_locales(root=content_root)
            rows = [(tag, counts[tag]) for tag in sorted(counts)]
        else:
            rows = [
                (entry.tag, entry.count)
                for entry in blog_queries.tag_counts(locale, root=content_root)
            ]
    except CONTENT_ERRORS as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    if json_output:
        if all_locales:
            echo_json(dict(rows))
        else:
            echo_json([{"tag": name, "count": count} for name, count in rows])
        return

    if not rows:
        console.print("[yellow]No tags found.[/yellow]")
        return

    table = Table()
    table.add_column("Tag", style="cyan")
    table.add_column("Posts", style="dim", justify="right")
    for name, count in rows:
        table.add_row(name, str(count))

    console.print(table)

