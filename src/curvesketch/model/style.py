"""
Display Style (Data Model)
==========================
Holds everything the renderer needs to know about *how* to draw:
colors, visibility toggles, font and the curve sampling step.

Color strings are parsed with matplotlib, so anything it understands
("#22CCCC", "#2c8", "black", ...) is accepted.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
import logging
import math

from matplotlib import colors as mcolors

from curvesketch import config

logger = logging.getLogger(__name__)


def to_rgb255(color: str) -> tuple[int, int, int]:
    """
    Convert a color string to integer RGB channels in [0, 255].

    Raises:
        ValueError: If matplotlib cannot interpret the color.
    """
    r, g, b = mcolors.to_rgb(color)
    return round(r * 255), round(g * 255), round(b * 255)


def to_hex(rgb: tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def normalize_color(color: str) -> str:
    """Return the color as lowercase '#rrggbb'."""
    return to_hex(to_rgb255(color))


def blend_colors(color: str, target: str, ratio: float) -> str:
    """
    Blend `color` toward `target`.

    Each channel is `a + (b - a) * ratio`, rounded half up, so a 50 % blend
    is the rounded midpoint of the two channels.

    Args:
        color: Base color.
        target: Color to blend toward.
        ratio: 0.0 keeps `color`, 1.0 yields `target`.

    Returns:
        The blended color as lowercase '#rrggbb'.
    """
    if not 0.0 <= ratio <= 1.0:
        raise ValueError(f"Blend ratio must be within [0, 1], got {ratio}.")

    base = to_rgb255(color)
    other = to_rgb255(target)
    mixed = tuple(
        int(math.floor(a + (b - a) * ratio + 0.5)) for a, b in zip(base, other)
    )
    return to_hex(mixed)


@dataclass
class StyleConfig:
    """
    Process-wide display state, read on every redraw.

    Mutate it through the command handlers only.
    """
    line_color: str = config.LINE_COLOR
    curve_color: str = config.CURVE_COLOR
    node_fill_color: str = config.NODE_FILL_COLOR
    selected_node_fill_color: str = config.SELECTED_NODE_FILL_COLOR
    node_stroke_color: str = config.NODE_STROKE_COLOR
    font_color: str = config.FONT_COLOR
    font_family: str = config.FONT_FAMILY
    font_size: int = config.FONT_SIZE
    node_radius: float = config.NODE_RADIUS
    show_lines: bool = True
    show_nodes: bool = True
    step: float = config.DEFAULT_STEP

    def reset(self) -> None:
        """Restore every field to its default."""
        defaults = StyleConfig()
        for f in fields(self):
            setattr(self, f.name, getattr(defaults, f.name))
        logger.info("Display style has been reset.")
