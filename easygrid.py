"""
easygrid: compile whitespace-aligned layout text into grid placements.

    >>> compiled = easy_grid('''
    ...          1fr  2fr
    ...     1fr  A    B
    ...     1fr  A    ..
    ... ''')
    >>> compiled.item_areas["A"]
    ItemArea(top=0, left=0, bottom=1, right=0)
"""

from __future__ import annotations

from ascii_render import render_layout
from layout_errors import ErrorKind, LayoutError, SlotError, SlotErrorKind
from layout_parser import (
    CompiledLayout,
    classify_layout,
    compile_rows,
    easy_grid,
    extract_empty_cells,
    extract_item_areas,
    format_layout,
    interpolate,
)
from layout_types import (
    CellCoordinates,
    CellEntry,
    GridRules,
    ItemArea,
    LayoutRow,
    LayoutShape,
    RowBounds,
    StructuredLayout,
)
from layout_validators import (
    calculate_row_bounds,
    split_row,
    validate_item_entry,
    validate_row,
    validate_rows,
)
from track_sizes import (
    TrackKind,
    classify_size,
    validate_column_headers,
    validate_size_specification,
)

__all__ = [
    "CellCoordinates",
    "CellEntry",
    "CompiledLayout",
    "ErrorKind",
    "GridRules",
    "ItemArea",
    "LayoutError",
    "LayoutRow",
    "LayoutShape",
    "RowBounds",
    "SlotError",
    "SlotErrorKind",
    "StructuredLayout",
    "TrackKind",
    "calculate_row_bounds",
    "classify_layout",
    "classify_size",
    "compile_rows",
    "easy_grid",
    "extract_empty_cells",
    "extract_item_areas",
    "format_layout",
    "interpolate",
    "render_layout",
    "split_row",
    "validate_column_headers",
    "validate_item_entry",
    "validate_row",
    "validate_rows",
    "validate_size_specification",
]
