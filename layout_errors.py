"""
Error types raised while compiling layout text.

Every failure is a LayoutError tagged with an ErrorKind. The message is
rendered from the structured context so callers can either show it as is or
inspect the fields.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from layout_types import RowBounds

__all__ = ["ErrorKind", "LayoutError", "SlotErrorKind", "SlotError"]


class ErrorKind(Enum):
    """Closed set of reasons a layout is rejected."""

    # Structural
    EMPTY_INPUT = "empty_input"
    EMPTY_ROW = "empty_row"
    MALFORMED_ROW = "malformed_row"
    AMBIGUOUS_SINGLE_COLUMN = "ambiguous_single_column"
    ROW_SIZE_MISMATCH = "row_size_mismatch"
    # Grammar
    INVALID_TRACK_SIZE = "invalid_track_size"
    INVALID_MINMAX = "invalid_minmax"
    INVALID_FIT_CONTENT = "invalid_fit_content"
    # Topology
    DUPLICATE_ITEM_IN_CELL = "duplicate_item_in_cell"
    NON_CONTIGUOUS_ITEM = "non_contiguous_item"
    NON_RECTANGULAR_SPAN = "non_rectangular_span"

    @property
    def category(self) -> str:
        if self in _GRAMMAR_KINDS:
            return "grammar"
        if self in _TOPOLOGY_KINDS:
            return "topology"
        return "structural"


_GRAMMAR_KINDS = frozenset({
    ErrorKind.INVALID_TRACK_SIZE,
    ErrorKind.INVALID_MINMAX,
    ErrorKind.INVALID_FIT_CONTENT,
})

_TOPOLOGY_KINDS = frozenset({
    ErrorKind.DUPLICATE_ITEM_IN_CELL,
    ErrorKind.NON_CONTIGUOUS_ITEM,
    ErrorKind.NON_RECTANGULAR_SPAN,
})


def _format_bounds_error(error: LayoutError) -> str:
    previous, current = error.bounds
    return (
        f"{error.item} has bounds of {previous.left}, {previous.right} on row "
        f"{error.row - 1} and bounds of {current.left}, {current.right} on row "
        f"{error.row}. Bounds must match to form a rectangle."
    )


_MESSAGES: dict[ErrorKind, Callable[[LayoutError], str]] = {
    ErrorKind.EMPTY_INPUT: lambda e: "Cannot validate empty rows",
    ErrorKind.EMPTY_ROW: lambda e: f"Row number {e.row} is empty",
    ErrorKind.MALFORMED_ROW: lambda e: f"'{e.value}' cannot be split correctly",
    ErrorKind.AMBIGUOUS_SINGLE_COLUMN: lambda e: (
        f"Row {e.row} has {e.actual} entries but only a single column header "
        f"is defined. It must define only a single entry for a row-only "
        f"specification or two entries for a single cell grid."
    ),
    ErrorKind.ROW_SIZE_MISMATCH: lambda e: (
        f"Row {e.row} has {e.actual} values instead of {e.expected}"
    ),
    ErrorKind.INVALID_TRACK_SIZE: lambda e: f"{e.value} is an invalid grid specification",
    ErrorKind.INVALID_MINMAX: lambda e: f"{e.value} is an invalid minmax specification",
    ErrorKind.INVALID_FIT_CONTENT: lambda e: f"{e.value} is an invalid fit-content specification",
    ErrorKind.DUPLICATE_ITEM_IN_CELL: lambda e: (
        f"{e.item} in row {e.row} and column {e.column} is repeated"
    ),
    ErrorKind.NON_CONTIGUOUS_ITEM: lambda e: (
        f"{e.item} in row {e.row} and column {e.column} is not contiguous"
    ),
    ErrorKind.NON_RECTANGULAR_SPAN: _format_bounds_error,
}


class LayoutError(ValueError):
    """Layout text was rejected."""

    def __init__(
        self,
        kind: ErrorKind,
        *,
        row: int | None = None,
        column: int | None = None,
        item: str | None = None,
        value: str | None = None,
        expected: int | None = None,
        actual: int | None = None,
        bounds: tuple[RowBounds, RowBounds] | None = None,
    ) -> None:
        self.kind = kind
        self.row = row
        self.column = column
        self.item = item
        self.value = value
        self.expected = expected
        self.actual = actual
        self.bounds = bounds
        super().__init__(_MESSAGES[kind](self))

    @property
    def message(self) -> str:
        return str(self)


class SlotErrorKind(Enum):
    """Mismatches between a compiled layout and the children supplied for it."""

    CHILD_COUNT_MISMATCH = "child_count_mismatch"
    MISSING_SLOT = "missing_slot"
    UNEXPECTED_POSITIONAL = "unexpected_positional"


class SlotError(ValueError):
    """Children supplied to a compiled layout do not fit it."""

    def __init__(self, kind: SlotErrorKind, message: str) -> None:
        self.kind = kind
        super().__init__(message)
