"""
ASCII preview of compiled easygrid layouts.

Draws the interior grid as a box table with the column sizes above it and the
row sizes to its left. Each cell shows its item identifiers, coloured per
item. Column-only and row-only layouts are drawn as a single strip of tracks.
"""

from __future__ import annotations

import logging
from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from layout_parser import CompiledLayout
from layout_types import LayoutShape

__all__ = ["render_layout"]

logger = logging.getLogger(__name__)

_PALETTE: list[Callable[[str], str]] = [
    chalk.red,
    chalk.green,
    chalk.yellow,
    chalk.blue,
    chalk.magenta,
    chalk.cyan,
    chalk.redBright,
    chalk.greenBright,
    chalk.yellowBright,
    chalk.blueBright,
]


def _plain(text: str) -> str:
    return text


def _border(left: str, middle: str, right: str, widths: list[int]) -> str:
    return left + middle.join("─" * w for w in widths) + right


def _render_tracks(compiled: CompiledLayout) -> str:
    """Render the sizes of a positional layout as one horizontal or vertical strip."""
    if compiled.shape == LayoutShape.COLUMN_ONLY:
        widths = [len(size) + 2 for size in compiled.column_sizes]
        return "\n".join([
            _border("┌", "┬", "┐", widths),
            "│" + "│".join(f" {size} " for size in compiled.column_sizes) + "│",
            _border("└", "┴", "┘", widths),
        ])

    width = max(len(size) for size in compiled.row_sizes) + 2
    lines = [_border("┌", "", "┐", [width])]
    for index, size in enumerate(compiled.row_sizes):
        if index > 0:
            lines.append(_border("├", "", "┤", [width]))
        lines.append("│" + size.center(width) + "│")
    lines.append(_border("└", "", "┘", [width]))
    return "\n".join(lines)


def render_layout(
    compiled: CompiledLayout,
    cell_width: int | None = None,
    empty_marker: str | None = None,
    colorize: bool = True,
) -> str:
    """
    Render a compiled layout as a box table.

    Args:
        compiled: The layout to draw
        cell_width: Characters per cell; defaults to fit the widest entry
        empty_marker: Text shown in unfilled cells; defaults to the marker
            the layout was compiled with
        colorize: Colour cells by item; disable for plain text output

    Returns:
        The rendered lines joined by newlines
    """
    if compiled.is_positional:
        return _render_tracks(compiled)

    if empty_marker is None:
        empty_marker = compiled.rules.empty_marker
    interior = [row[1:] for row in compiled.layout[1:]]
    texts = [[",".join(cell) or empty_marker for cell in row] for row in interior]

    if cell_width is None:
        widest = max(len(text) for text in list(compiled.column_sizes) + sum(texts, []))
        cell_width = widest + 2
    logger.debug("render_layout: %s layout, cell_width=%d", compiled.shape.value, cell_width)

    item_colors: dict[str, Callable[[str], str]] = {
        item: _PALETTE[i % len(_PALETTE)] if colorize else _plain
        for i, item in enumerate(compiled.ordered_items())
    }

    label_width = max(len(size) for size in compiled.row_sizes)
    margin = " " * (label_width + 1)
    widths = [cell_width] * len(compiled.column_sizes)

    lines = [margin + " " + " ".join(size.center(cell_width) for size in compiled.column_sizes).rstrip()]
    lines.append(margin + _border("┌", "┬", "┐", widths))
    for row_index, (size, row) in enumerate(zip(compiled.row_sizes, texts)):
        if row_index > 0:
            lines.append(margin + _border("├", "┼", "┤", widths))
        parts = []
        for column_index, text in enumerate(row):
            cell = interior[row_index][column_index]
            colour = item_colors[cell[0]] if cell else _plain
            parts.append(colour(text.center(cell_width)))
        lines.append(size.rjust(label_width) + " │" + "│".join(parts) + "│")
    lines.append(margin + _border("└", "┴", "┘", widths))
    return "\n".join(lines)
