# ABOUTME: CLI package for folio, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging

import click

from folio.cli.commands import blog_cmd, books_cmd, gradient_cmd, paths_cmd


@click.group()
@click.version_option(package_name="folio")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """folio - query blog posts and books from a localized content tree."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


cli.add_command(blog_cmd.blog)
cli.add_command(books_cmd.books)
cli.add_command(paths_cmd.paths)
cli.add_command(gradient_cmd.gradient)
