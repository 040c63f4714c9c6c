"""Color parsing and RGB interpolation helpers."""

import math

import matplotlib.colors as mcolors

GRADIENT_DELIMITER = "-"


def to_rgb(color):
    """Parse a color string into an ``(r, g, b)`` tuple of 0-255 ints.

    Anything ``matplotlib.colors`` understands is accepted: ``#rgb``,
    ``#rrggbb`` and named colors. Alpha is dropped.
    """
    if not isinstance(color, str):
        raise ValueError(f"Invalid color: {color!r}")
    try:
        channels = mcolors.to_rgb(color.strip())
    except (ValueError, TypeError) as exc:
        raise ValueError(f"Invalid color: {color!r}") from exc
    return tuple(_round_half_up(c * 255) for c in channels)


def is_color(color):
    try:
        to_rgb(color)
    except ValueError:
        return False
    return True


def rgb_to_hex(comps):
    clamped = tuple(max(0, min(255, int(c))) for c in comps)
    return "#%02x%02x%02x" % clamped


def to_hex(color):
    """Normalize any parseable color to lowercase ``#rrggbb``."""
    return rgb_to_hex(to_rgb(color))


def _round_half_up(value):
    return int(math.floor(value + 0.5))


def interpolate_rgb(start, end, t):
    """Blend two ``(r, g, b)`` tuples channel by channel; ``t`` in [0, 1]."""
    return tuple(_round_half_up(a + (b - a) * t) for a, b in zip(start, end))


def parse_gradient(spec):
    """Split ``"C1-C2"`` into its color stops, or return None if not a gradient."""
    if not isinstance(spec, str) or GRADIENT_DELIMITER not in spec:
        return None
    stops = [part.strip() for part in spec.split(GRADIENT_DELIMITER)]
    if len(stops) < 2 or not all(stops):
        return None
    if not all(is_color(stop) for stop in stops):
        return None
    return stops
