"""
Compiling easygrid layout text into placements.

validate_rows() produces the StructuredLayout; this module classifies it,
extracts item areas and empty cells from its interior, and bundles the result
into a CompiledLayout for the rendering layer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable, Iterable, Sequence

from layout_errors import SlotError, SlotErrorKind
from layout_types import (
    CellCoordinates,
    GridRules,
    ItemArea,
    LayoutShape,
    StructuredLayout,
)
from layout_validators import DEFAULT_RULES, validate_rows

__all__ = [
    "CompiledLayout",
    "classify_layout",
    "compile_rows",
    "extract_item_areas",
    "extract_empty_cells",
    "interpolate",
    "easy_grid",
    "format_layout",
]

logger = logging.getLogger(__name__)


# =============================================================================
# Geometry Extraction
# =============================================================================


def classify_layout(layout: StructuredLayout) -> LayoutShape:
    """Determine which of the four layout shapes a validated layout has."""
    if len(layout) == 1:
        return LayoutShape.COLUMN_ONLY
    if len(layout[0]) == 1:
        if all(len(row) == 1 for row in layout[1:]):
            return LayoutShape.ROW_ONLY
        return LayoutShape.SINGLE_CELL
    return LayoutShape.GRID


def _interior(layout: StructuredLayout) -> StructuredLayout:
    """Strip the header row and the row size column.

    Column-only and row-only layouts have no interior.
    """
    if classify_layout(layout) in (LayoutShape.COLUMN_ONLY, LayoutShape.ROW_ONLY):
        return []
    return [row[1:] for row in layout[1:]]


def extract_item_areas(layout: StructuredLayout) -> dict[str, ItemArea]:
    """
    Compute the bounding box of every item in the layout interior.

    Areas are ordered by first appearance, scanning row by row.
    """
    areas: dict[str, ItemArea] = {}
    for row_index, row in enumerate(_interior(layout)):
        for column_index, cell in enumerate(row):
            for item in cell:
                area = areas.get(item)
                if area is None:
                    areas[item] = ItemArea(row_index, column_index, row_index, column_index)
                else:
                    areas[item] = ItemArea(
                        top=min(area.top, row_index),
                        left=min(area.left, column_index),
                        bottom=max(area.bottom, row_index),
                        right=max(area.right, column_index),
                    )
    return areas


def extract_empty_cells(layout: StructuredLayout) -> list[CellCoordinates]:
    """Return the coordinates of every interior cell without items, row by row."""
    return [
        CellCoordinates(row_index, column_index)
        for row_index, row in enumerate(_interior(layout))
        for column_index, cell in enumerate(row)
        if not cell
    ]


# =============================================================================
# Template Interpolation
# =============================================================================


def _float_to_text(value: float) -> str:
    # 3.0 reads as "3" in a layout, not "3.0"
    if value.is_integer():
        return str(int(value))
    return str(value)


def _fraction_to_text(value: Fraction) -> str:
    if value.denominator == 1:
        return str(value.numerator)
    return _float_to_text(float(value))


def _sequence_to_text(value: Sequence[Any]) -> str:
    return ",".join(_to_text(element) for element in value)


# Checked in order; bool must precede int since bool subclasses int
_TEXT_CONVERSIONS: tuple[tuple[type | tuple[type, ...], Callable[[Any], str]], ...] = (
    (str, str),
    (bool, lambda value: "true" if value else "false"),
    (int, str),
    (float, _float_to_text),
    (Decimal, str),
    (Fraction, _fraction_to_text),
    ((list, tuple), _sequence_to_text),
    (type(None), lambda value: ""),
)


def _to_text(value: Any) -> str:
    for kinds, convert in _TEXT_CONVERSIONS:
        if isinstance(value, kinds):
            return convert(value)
    raise TypeError(f"Cannot interpolate value of type {type(value).__name__}: {value!r}")


def interpolate(fragments: Sequence[str], *values: Any) -> str:
    """
    Join literal fragments with interpolated values.

    There must be exactly one value between each pair of fragments.

    Example:
        interpolate(["-", "-", "-"], "Hello", [1, 2]) -> "-Hello-1,2-"
    """
    if len(values) != len(fragments) - 1:
        raise ValueError(
            f"Expected {len(fragments) - 1} values for {len(fragments)} fragments, "
            f"got {len(values)}"
        )
    parts = [fragments[0]]
    for value, fragment in zip(values, fragments[1:]):
        parts.append(_to_text(value))
        parts.append(fragment)
    return "".join(parts)


# =============================================================================
# Compiled Layout
# =============================================================================


@dataclass(frozen=True)
class CompiledLayout:
    """A validated layout together with its extracted geometry."""

    shape: LayoutShape
    layout: StructuredLayout
    column_sizes: tuple[str, ...]
    row_sizes: tuple[str, ...]
    item_areas: dict[str, ItemArea]
    empty_cells: list[CellCoordinates]
    rules: GridRules = DEFAULT_RULES

    @property
    def is_positional(self) -> bool:
        """Column-only and row-only layouts take children by position."""
        return self.shape in (LayoutShape.COLUMN_ONLY, LayoutShape.ROW_ONLY)

    @property
    def track_count(self) -> int | None:
        """Number of positional children required, None for named layouts."""
        if self.shape == LayoutShape.COLUMN_ONLY:
            return len(self.column_sizes)
        if self.shape == LayoutShape.ROW_ONLY:
            return len(self.row_sizes)
        return None

    def ordered_items(self) -> list[str]:
        """Item identifiers in the order their cells are emitted."""
        return sorted(self.item_areas)

    def check_children(self, count: int) -> None:
        """Check that count positional children fit this layout."""
        if not self.is_positional:
            raise SlotError(
                SlotErrorKind.UNEXPECTED_POSITIONAL,
                "Grid layouts take named child slots, not positional children",
            )
        if count != self.track_count:
            label = "Column-only" if self.shape == LayoutShape.COLUMN_ONLY else "Row-only"
            raise SlotError(
                SlotErrorKind.CHILD_COUNT_MISMATCH,
                f"{label} easy grid requires {self.track_count} children, got {count}",
            )

    def check_slots(self, names: Iterable[str]) -> None:
        """Check that a named child slot exists for every item."""
        if self.is_positional:
            raise SlotError(
                SlotErrorKind.UNEXPECTED_POSITIONAL,
                f"{self.shape.value} layouts take positional children, not named slots",
            )
        available = set(names)
        for item in self.ordered_items():
            if item not in available:
                raise SlotError(SlotErrorKind.MISSING_SLOT, f"No child slot named {item} found.")


def compile_rows(rows: list[str], rules: GridRules = DEFAULT_RULES) -> CompiledLayout:
    """Validate text rows and extract everything the rendering layer needs."""
    layout = validate_rows(rows, rules)
    shape = classify_layout(layout)
    if shape == LayoutShape.ROW_ONLY:
        # Every line of a row-only layout, the first included, sizes a row
        column_sizes: tuple[str, ...] = ()
        row_sizes = tuple(row[0][0] for row in layout)
    else:
        column_sizes = tuple(header[0] for header in layout[0])
        row_sizes = tuple(row[0][0] for row in layout[1:])
    compiled = CompiledLayout(
        shape=shape,
        layout=layout,
        column_sizes=column_sizes,
        row_sizes=row_sizes,
        item_areas=extract_item_areas(layout),
        empty_cells=extract_empty_cells(layout),
        rules=rules,
    )
    logger.info(
        "compile_rows: shape=%s, columns=%d, rows=%d, items=%d, empty=%d",
        shape.value,
        len(compiled.column_sizes),
        len(compiled.row_sizes),
        len(compiled.item_areas),
        len(compiled.empty_cells),
    )
    return compiled


def easy_grid(
    template: str | Sequence[str],
    *values: Any,
    rules: GridRules = DEFAULT_RULES,
) -> CompiledLayout:
    """
    Compile a layout template.

    The template is either a single string or a sequence of literal fragments
    with values to interpolate between them. Blank lines and surrounding
    indentation are ignored, so layouts can be written as indented
    triple-quoted strings:

        easy_grid('''
                 1fr  1fr
            1fr  A    B
            1fr  ..   B
        ''')

    Raises:
        LayoutError: if the layout text is invalid
    """
    fragments = (template,) if isinstance(template, str) else template
    text = interpolate(fragments, *values)
    rows = [line.strip() for line in text.splitlines() if line.strip()]
    return compile_rows(rows, rules)


# =============================================================================
# Formatting
# =============================================================================


def format_layout(layout: StructuredLayout, rules: GridRules = DEFAULT_RULES) -> list[str]:
    """
    Render a StructuredLayout back into aligned layout text rows.

    validate_rows() on the result gives back an equal layout.
    """
    has_size_column = any(len(row) > 1 for row in layout[1:])
    table: list[list[str]] = []
    for row_index, row in enumerate(layout):
        cells = [rules.item_separator.join(cell) or rules.empty_marker for cell in row]
        if row_index == 0 and has_size_column:
            cells.insert(0, "")
        table.append(cells)

    widths: dict[int, int] = {}
    for cells in table:
        for column, text in enumerate(cells):
            widths[column] = max(widths.get(column, 0), len(text))

    return [
        "  ".join(text.ljust(widths[column]) for column, text in enumerate(cells)).rstrip()
        for cells in table
    ]
