"""
Shared type definitions for the easygrid layout compiler.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LayoutShape(Enum):
    """The four mutually exclusive forms a layout can take."""

    COLUMN_ONLY = "column_only"  # Header row only
    ROW_ONLY = "row_only"  # One header column, rows carry only a size
    SINGLE_CELL = "single_cell"  # One header column, rows carry one entry
    GRID = "grid"


@dataclass(frozen=True)
class GridRules:
    """Options governing how layout text is read."""

    empty_marker: str = ".."
    item_separator: str = ","


# =============================================================================
# Geometry Types
# =============================================================================


@dataclass(frozen=True)
class RowBounds:
    """Left-most and right-most position of an item within one row."""

    left: int
    right: int


@dataclass(frozen=True)
class ItemArea:
    """Inclusive bounding box of an item, relative to the interior grid."""

    top: int
    left: int
    bottom: int
    right: int

    @property
    def rows(self) -> int:
        return self.bottom - self.top + 1

    @property
    def cols(self) -> int:
        return self.right - self.left + 1


@dataclass(frozen=True)
class CellCoordinates:
    """Position of an unfilled cell, relative to the interior grid."""

    row: int
    column: int


# One cell: item identifiers, or a singleton track size for header positions
CellEntry = list[str]
LayoutRow = list[CellEntry]
# rows -> columns -> identifiers; row 0 is the column header row
StructuredLayout = list[LayoutRow]
