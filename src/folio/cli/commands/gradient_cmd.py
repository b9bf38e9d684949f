# ABOUTME: The `folio gradient` command for generating placeholder book covers.
# ABOUTME: Prints the seeded gradient as SVG markup, a data URL, or a CSS value.

import click
from rich.console import Console

from folio.core.gradient import (
    DIRECTIONS,
    GradientOptions,
    GradientOptionsError,
    derive_seed,
    render_svg,
    to_css_gradient,
    to_data_url,
)

console = Console()

_RENDERERS = {
    "svg": render_svg,
    "data-url": to_data_url,
    "css": to_css_gradient,
}


@click.command("gradient")
@click.argument("seed")
@click.option(
    "--author",
    default=None,
    help="Treat SEED as a book title and derive the seed from title and author.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(list(_RENDERERS)),
    default="svg",
    show_default=True,
    help="Output format.",
)
@click.option("--width", type=int, default=None, help="Image width (default: 300).")
@click.option("--height", type=int, default=None, help="Image height (default: 400).")
@click.option(
    "--direction",
    type=click.Choice(DIRECTIONS),
    default=None,
    help="Gradient direction (default: derived from the seed).",
)
@click.option(
    "--color",
    "colors",
    multiple=True,
    help="Color stop; repeat for more stops (default: palette derived from the seed).",
)
def gradient(
    seed: str,
    author: str | None,
    output_format: str,
    width: int | None,
    height: int | None,
    direction: str | None,
    colors: tuple[str, ...],
) -> None:
    """Generate the deterministic gradient cover for SEED."""
    if author is not None:
        seed = derive_seed(seed, author)

    options = GradientOptions(
        width=width,
        height=height,
        colors=list(colors) if colors else None,
        direction=direction,
        seed=seed,
    )

    try:
        output = _RENDERERS[output_format](options)
    except GradientOptionsError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(1) from exc

    click.echo(output)
