"""Tests for ascii_render module."""

import re

from ascii_render import render_layout
from layout_parser import easy_grid
from layout_types import GridRules

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


class TestRenderLayout:
    """Tests for the layout preview."""

    def test_grid(self) -> None:
        """A grid is drawn with sizes above and to the left."""
        compiled = easy_grid("1fr 2fr\n1fr Nav Box\n2fr Nav Box")
        assert render_layout(compiled, colorize=False).split("\n") == [
            "      1fr   2fr",
            "    ┌─────┬─────┐",
            "1fr │ Nav │ Box │",
            "    ├─────┼─────┤",
            "2fr │ Nav │ Box │",
            "    └─────┴─────┘",
        ]

    def test_empty_cells_show_marker(self) -> None:
        """Unfilled cells show the empty marker."""
        compiled = easy_grid("1fr 1fr\n1fr A ..")
        lines = render_layout(compiled, colorize=False).split("\n")
        assert ".." in lines[2]
        assert "A" in lines[2]

    def test_empty_cells_use_compiled_marker(self) -> None:
        """The marker comes from the rules the layout was compiled with."""
        compiled = easy_grid("1fr 1fr\n1fr A __", rules=GridRules(empty_marker="__"))
        lines = render_layout(compiled, colorize=False).split("\n")
        assert "__" in lines[2]
        assert ".." not in lines[2]
        override = render_layout(compiled, empty_marker="--", colorize=False).split("\n")
        assert "--" in override[2]

    def test_custom_cell_width(self) -> None:
        """cell_width sets the box width."""
        compiled = easy_grid("1fr\n1fr A")
        lines = render_layout(compiled, cell_width=7, colorize=False).split("\n")
        assert lines[1] == "    ┌───────┐"

    def test_colour_does_not_change_text(self) -> None:
        """Colouring only adds escape codes."""
        compiled = easy_grid("1fr 1fr 1fr\n1fr A,B B ..\n1fr A,B B C")
        coloured = render_layout(compiled)
        assert ANSI_ESCAPE.sub("", coloured) == render_layout(compiled, colorize=False)

    def test_column_only(self) -> None:
        """Column-only layouts are a horizontal strip of sizes."""
        compiled = easy_grid("1fr 20px")
        assert render_layout(compiled).split("\n") == [
            "┌─────┬──────┐",
            "│ 1fr │ 20px │",
            "└─────┴──────┘",
        ]

    def test_row_only(self) -> None:
        """Row-only layouts are a vertical strip of sizes."""
        compiled = easy_grid("1fr\nauto")
        assert render_layout(compiled).split("\n") == [
            "┌──────┐",
            "│ 1fr  │",
            "├──────┤",
            "│ auto │",
            "└──────┘",
        ]
