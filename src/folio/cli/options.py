# ABOUTME: Shared Click options for folio CLI commands.
# ABOUTME: Provides reusable decorators for --content, --locale, and --json.

import json
from pathlib import Path

import click
import yaml

from folio.config import DEFAULT_CONTENT_ROOT, DEFAULT_LOCALE, SUPPORTED_LOCALES
from folio.content.schema import FrontMatterError

# Authoring errors surfaced by the query layer unchanged
CONTENT_ERRORS = (FrontMatterError, yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError)

content_option = click.option(
    "--content",
    "content_root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help=f"Path to the content directory (default: ./{DEFAULT_CONTENT_ROOT})",
)

locale_option = click.option(
    "--locale",
    type=click.Choice(SUPPORTED_LOCALES),
    default=DEFAULT_LOCALE,
    show_default=True,
    help="Content locale.",
)

json_option = click.option(
    "--json",
    "json_output",
    is_flag=True,
    default=False,
    help="Output results as JSON.",
)


def echo_json(data: object) -> None:
    """Print data as indented JSON, keeping non-ASCII text readable."""
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))
