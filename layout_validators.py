"""
Validation of easygrid layout text.

Turns text rows into a StructuredLayout, a 3-level list of rows, columns and
cell values. Header and row size positions only ever hold a single value.
For example:

          1fr  2fr
      1fr A,B  B
      2fr A,B  B

is validated into:

    [[['1fr'], ['2fr']],
     [['1fr'], ['A', 'B'], ['B']],
     [['2fr'], ['A', 'B'], ['B']]]
"""

from __future__ import annotations

import logging
import re

from layout_errors import ErrorKind, LayoutError
from layout_types import CellEntry, GridRules, LayoutRow, RowBounds, StructuredLayout
from track_sizes import validate_column_headers, validate_size_specification

__all__ = [
    "split_row",
    "validate_item_entry",
    "validate_row",
    "calculate_row_bounds",
    "validate_rows",
]

logger = logging.getLogger(__name__)

DEFAULT_RULES = GridRules()

# Either a call such as "minmax(1px, 2fr)" whose arguments are separated by a
# comma and whitespace, or any run of non-space characters
_ROW_TOKEN = re.compile(r"[^\s(]+\((?:[^\s,()]+,\s+)*[^\s()]+\)|\S+")


def split_row(row: str) -> list[str]:
    """
    Split one layout row into tokens, keeping spaces inside calls intact.

    Example:
        split_row("minmax(1px, 2fr) A,B  ..") -> ["minmax(1px, 2fr)", "A,B", ".."]

    Raises:
        LayoutError: MALFORMED_ROW if the row holds no tokens
    """
    tokens = _ROW_TOKEN.findall(row)
    if not tokens:
        raise LayoutError(ErrorKind.MALFORMED_ROW, value=row)
    return tokens


def validate_item_entry(
    entry: str,
    row_index: int,
    column_index: int,
    rules: GridRules = DEFAULT_RULES,
) -> CellEntry:
    """
    Validate the comma separated item identifiers of one cell.

    Identifiers may contain any character except the separator, but the same
    identifier cannot appear twice in one cell. The empty marker on its own
    denotes an unfilled cell and yields an empty list.
    """
    items = [value.strip() for value in entry.split(rules.item_separator)]
    if len(items) == 1 and items[0] == rules.empty_marker:
        return []

    seen: set[str] = set()
    ordered: CellEntry = []
    for item in items:
        if item in seen:
            raise LayoutError(
                ErrorKind.DUPLICATE_ITEM_IN_CELL,
                item=item, row=row_index, column=column_index,
            )
        seen.add(item)
        ordered.append(item)
    return ordered


def validate_row(
    tokens: list[str],
    row_index: int,
    rules: GridRules = DEFAULT_RULES,
) -> LayoutRow:
    """
    Validate a tokenized row: a size specification followed by zero or more
    cell entries.

    An item may cover several cells of a row, but only as one unbroken run:
    once an item is absent from a cell it cannot reappear further right.

    Raises:
        LayoutError: EMPTY_ROW, NON_CONTIGUOUS_ITEM, or any error from the
            size or item entry validators
    """
    if not tokens:
        raise LayoutError(ErrorKind.EMPTY_ROW, row=row_index)

    row_values: LayoutRow = [[validate_size_specification(tokens[0])]]

    seen_items: set[str] = set()
    last_items: set[str] = set()
    for column_index in range(1, len(tokens)):
        items = validate_item_entry(tokens[column_index], row_index, column_index, rules)
        for item in items:
            if item in seen_items and item not in last_items:
                raise LayoutError(
                    ErrorKind.NON_CONTIGUOUS_ITEM,
                    item=item, row=row_index, column=column_index,
                )
            seen_items.add(item)
        last_items = set(items)
        row_values.append(items)

    return row_values


def calculate_row_bounds(row_values: LayoutRow) -> dict[str, RowBounds]:
    """
    Calculate the left-most and right-most position of every value in a row.

    Positions index the whole row, so the size specification sits at 0.
    The result is ordered by first appearance.
    """
    bounds: dict[str, RowBounds] = {}
    for position, cell in enumerate(row_values):
        for item in cell:
            if item in bounds:
                bounds[item] = RowBounds(bounds[item].left, position)
            else:
                bounds[item] = RowBounds(position, position)
    return bounds


def validate_rows(rows: list[str], rules: GridRules = DEFAULT_RULES) -> StructuredLayout:
    """
    Validate layout text rows into a StructuredLayout.

    Row 0 holds the column sizes. With a single row the layout is column-only.
    With a single column, row 1 decides between a row-only layout (rows hold
    only a size) and a single cell grid (rows hold a size and one entry).
    Otherwise every row must hold a size plus one entry per column.

    Items spanning several rows must cover the same columns on each pair of
    consecutive rows they appear on, so that they form a rectangle.

    Args:
        rows: Layout text, one string per row

    Returns:
        The validated StructuredLayout

    Raises:
        LayoutError: on the first problem found; nothing is returned partially
    """
    if not rows:
        raise LayoutError(ErrorKind.EMPTY_INPUT)

    column_headers = validate_column_headers(split_row(rows[0]))
    if len(rows) == 1:
        logger.debug("validate_rows: column-only layout with %d columns", len(column_headers))
        return [column_headers]

    column_count = len(column_headers)
    expected_row_size = column_count + 1
    if column_count == 1:
        second_row = validate_row(split_row(rows[1]), 1, rules)
        if len(second_row) > 2:
            raise LayoutError(
                ErrorKind.AMBIGUOUS_SINGLE_COLUMN, row=1, actual=len(second_row)
            )
        if len(second_row) == 1:
            expected_row_size = 1

    validated: StructuredLayout = [column_headers]
    last_bounds: dict[str, RowBounds] = {}
    for row_index in range(1, len(rows)):
        row_values = validate_row(split_row(rows[row_index]), row_index, rules)
        current_bounds = calculate_row_bounds(row_values)
        for item, current in current_bounds.items():
            previous = last_bounds.get(item)
            if previous is not None and previous != current:
                raise LayoutError(
                    ErrorKind.NON_RECTANGULAR_SPAN,
                    item=item, row=row_index, bounds=(previous, current),
                )
        last_bounds = current_bounds

        if len(row_values) != expected_row_size:
            raise LayoutError(
                ErrorKind.ROW_SIZE_MISMATCH,
                row=row_index, actual=len(row_values), expected=expected_row_size,
            )
        logger.debug("validate_rows: row %d -> %s", row_index, row_values)
        validated.append(row_values)

    return validated
