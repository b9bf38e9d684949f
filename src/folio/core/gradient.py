# ABOUTME: Deterministic gradient placeholder covers for books without a cover image.
# ABOUTME: Maps a text seed to a palette and direction, then renders SVG, data URL, or CSS.

from dataclasses import dataclass
from typing import Literal
from urllib.parse import quote

Direction = Literal["to-r", "to-br", "to-b", "to-bl", "to-l", "to-tl", "to-t", "to-tr"]

DEFAULT_WIDTH = 300
DEFAULT_HEIGHT = 400
DEFAULT_SEED = "default"

PALETTES: tuple[tuple[str, ...], ...] = (
    # Blues
    ("#667eea", "#764ba2"),
    ("#4facfe", "#00f2fe"),
    ("#43e97b", "#38f9d7"),
    # Purples
    ("#fa709a", "#fee140"),
    ("#a8edea", "#fed6e3"),
    ("#d299c2", "#fef9d7"),
    # Oranges
    ("#fd746c", "#ff9068"),
    ("#ffa726", "#fb8c00"),
    ("#ffb347", "#ffcc02"),
    # Greens
    ("#56ab2f", "#a8e6cf"),
    ("#11998e", "#38ef7d"),
    ("#00b4db", "#0083b0"),
    # Reds
    ("#ff6b6b", "#feca57"),
    ("#ff7675", "#fd79a8"),
    ("#e17055", "#f39c12"),
    # Deep tones
    ("#2c3e50", "#4ca1af"),
    ("#232526", "#414345"),
    ("#1e3c72", "#2a5298"),
)

DIRECTIONS: tuple[Direction, ...] = (
    "to-r", "to-br", "to-b", "to-bl", "to-l", "to-tl", "to-t", "to-tr",
)

# (x1, y1, x2, y2) for the SVG linearGradient element
_SVG_COORDS: dict[str, tuple[str, str, str, str]] = {
    "to-r": ("0%", "0%", "100%", "0%"),
    "to-l": ("100%", "0%", "0%", "0%"),
    "to-b": ("0%", "0%", "0%", "100%"),
    "to-t": ("0%", "100%", "0%", "0%"),
    "to-br": ("0%", "0%", "100%", "100%"),
    "to-bl": ("100%", "0%", "0%", "100%"),
    "to-tr": ("0%", "100%", "100%", "0%"),
    "to-tl": ("100%", "100%", "0%", "0%"),
}

_CSS_DIRECTIONS: dict[str, str] = {
    "to-r": "to right",
    "to-l": "to left",
    "to-b": "to bottom",
    "to-t": "to top",
    "to-br": "to bottom right",
    "to-bl": "to bottom left",
    "to-tr": "to top right",
    "to-tl": "to top left",
}

_URI_COMPONENT_SAFE = "-_.!~*'()"


class GradientOptionsError(ValueError):
    """Raised when gradient options cannot be rendered."""


@dataclass
class GradientOptions:
    """Caller-supplied gradient settings. Unset fields are derived or defaulted."""

    width: int | None = None
    height: int | None = None
    colors: list[str] | None = None
    direction: Direction | None = None
    seed: str | None = None


@dataclass(frozen=True)
class ResolvedGradient:
    """Fully resolved gradient settings, ready to render."""

    width: int
    height: int
    colors: tuple[str, ...]
    direction: Direction
    seed: str


def hash_seed(text: str) -> int:
    """Polynomial string hash (h * 31 + c) over UTF-16 code units.

    Folded to a signed 32-bit integer after every step and returned as its
    absolute value, so results are identical on every platform.
    """
    value = 0
    encoded = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(encoded), 2):
        unit = encoded[i] | (encoded[i + 1] << 8)
        value = ((value << 5) - value + unit) & 0xFFFFFFFF
        if value >= 0x80000000:
            value -= 0x100000000
    return abs(value)


def resolve_options(seed: str, overrides: GradientOptions | None = None) -> ResolvedGradient:
    """Derive palette and direction from ``seed``; explicit overrides win.

    Raises:
        GradientOptionsError: If an override is invalid.
    """
    overrides = overrides or GradientOptions()
    digest = hash_seed(seed)

    width = overrides.width if overrides.width is not None else DEFAULT_WIDTH
    height = overrides.height if overrides.height is not None else DEFAULT_HEIGHT
    colors = (
        tuple(overrides.colors)
        if overrides.colors is not None
        else PALETTES[digest % len(PALETTES)]
    )
    direction = (
        overrides.direction
        if overrides.direction is not None
        else DIRECTIONS[digest % len(DIRECTIONS)]
    )

    if width <= 0 or height <= 0:
        raise GradientOptionsError(f"Dimensions must be positive, got {width}x{height}")
    if not colors:
        raise GradientOptionsError("At least one color is required")
    if direction not in _SVG_COORDS:
        raise GradientOptionsError(f"Unknown direction: {direction!r}")

    return ResolvedGradient(
        width=width,
        height=height,
        colors=colors,
        direction=direction,
        seed=overrides.seed if overrides.seed is not None else seed,
    )


def _resolve(options: GradientOptions) -> ResolvedGradient:
    return resolve_options(options.seed or DEFAULT_SEED, options)


def _format_offset(percent: float) -> str:
    if percent.is_integer():
        return str(int(percent))
    return repr(percent)


def _stop_offsets(count: int) -> list[str]:
    """Evenly spaced stop offsets from 0% to 100%. A single color sits at 0%."""
    if count == 1:
        return ["0"]
    return [_format_offset(index / (count - 1) * 100) for index in range(count)]


def render_svg(options: GradientOptions) -> str:
    """Render a linear-gradient SVG filling a width x height rectangle."""
    resolved = _resolve(options)
    x1, y1, x2, y2 = _SVG_COORDS[resolved.direction]
    stops = "".join(
        f'<stop offset="{offset}%" style="stop-color:{color};stop-opacity:1" />'
        for offset, color in zip(
            _stop_offsets(len(resolved.colors)), resolved.colors, strict=True
        )
    )
    width, height = resolved.width, resolved.height
    return (
        f'<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" '
        f'xmlns="http://www.w3.org/2000/svg">\n'
        f"  <defs>\n"
        f'    <linearGradient id="grad" x1="{x1}" y1="{y1}" x2="{x2}" y2="{y2}">\n'
        f"      {stops}\n"
        f"    </linearGradient>\n"
        f"  </defs>\n"
        f'  <rect width="100%" height="100%" fill="url(#grad)"/>\n'
        f"</svg>"
    )


def to_data_url(options: GradientOptions) -> str:
    """The SVG as a percent-encoded ``data:image/svg+xml`` URI."""
    return "data:image/svg+xml," + quote(render_svg(options), safe=_URI_COMPONENT_SAFE)


def to_css_gradient(options: GradientOptions) -> str:
    """A CSS ``linear-gradient(...)`` value with the same colors and direction."""
    resolved = _resolve(options)
    return f"linear-gradient({_CSS_DIRECTIONS[resolved.direction]}, {', '.join(resolved.colors)})"


def derive_seed(title: str, author: str | None = None) -> str:
    """Seed for a book cover: ``"<title>-<author>"``, author defaulting to ``unknown``."""
    return f"{title}-{author or 'unknown'}"
