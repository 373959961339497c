#!/usr/bin/env python3
"""
Demo of compiling easygrid layout text.

Usage:
    python parse_demo.py [--verbose] [sample-name | layout-file]
"""

import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ascii_render import render_layout
from layout_errors import LayoutError
from layout_parser import CompiledLayout, easy_grid

SAMPLES = dict(
    plaid="""
                  1fr    100px  1fr
        1fr       A      A,B    B
        100px     A      A,B    B
        1fr       C      C      ..
    """,
    button_badge="""
                  minmax(10px, auto)  20px
        20px      Button              Button,Badge
        auto      Button              Button
    """,
    spacer="""
                  1fr   10em  1fr
        1fr       ..    ..    ..
        10em      ..    Box   ..
        1fr       ..    ..    ..
    """,
    column_only="""
        1fr  fit-content(20%)  3fr
    """,
    row_only="""
        1fr
        min-content
        2fr
    """,
    broken="""
             1fr  2fr
        1fr  A,B  C,D
        2fr  C,D  C,D
    """,
)


def describe(compiled: CompiledLayout) -> Table:
    """Tabulate item areas and empty cells."""
    table = Table(title=f"{compiled.shape.value} layout")
    table.add_column("Item", style="bold")
    table.add_column("Top")
    table.add_column("Left")
    table.add_column("Bottom")
    table.add_column("Right")
    for item in compiled.ordered_items():
        area = compiled.item_areas[item]
        table.add_row(item, str(area.top), str(area.left), str(area.bottom), str(area.right))
    for cell in compiled.empty_cells:
        table.add_row("(empty)", str(cell.row), str(cell.column), str(cell.row), str(cell.column))
    return table


def main(argv: list[str]) -> int:
    """Compile one layout and print it, returning the exit status."""
    console = Console()
    args = [arg for arg in argv if arg != "--verbose"]
    if len(args) != len(argv):
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s: %(message)s')

    source = args[0] if args else "plaid"
    if source in SAMPLES:
        text = SAMPLES[source]
    else:
        text = Path(source).read_text()

    try:
        compiled = easy_grid(text)
    except LayoutError as error:
        message = Text()
        message.append(f"{error.kind.value} ({error.kind.category})\n", style="bold red")
        message.append(str(error))
        console.print(Panel(message, title=f"easygrid - {source}", border_style="red"))
        return 1

    console.print(Panel(Text.from_ansi(render_layout(compiled)), title=f"easygrid - {source}"))
    if compiled.is_positional:
        console.print(f"Requires {compiled.track_count} positional children")
    else:
        console.print(describe(compiled))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
