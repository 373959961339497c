"""End-to-end tests through the easygrid facade."""

import pytest

import easygrid
from easygrid import (
    CellCoordinates,
    ErrorKind,
    ItemArea,
    LayoutError,
    LayoutShape,
    easy_grid,
    validate_rows,
)


class TestFacade:
    """Tests for the public API."""

    def test_exports_resolve(self) -> None:
        """Everything listed in __all__ is importable."""
        for name in easygrid.__all__:
            assert hasattr(easygrid, name), name

    def test_plaid(self) -> None:
        """A layout with overlapping items and unfilled cells."""
        compiled = easy_grid("""
                      1fr    100px  1fr
            1fr       A      A,B    B
            100px     A      A,B    B
            1fr       C      C      ..
        """)
        assert compiled.shape == LayoutShape.GRID
        assert compiled.item_areas == {
            "A": ItemArea(0, 0, 1, 1),
            "B": ItemArea(0, 1, 1, 2),
            "C": ItemArea(2, 0, 2, 1),
        }
        assert compiled.empty_cells == [CellCoordinates(2, 2)]

    def test_two_empty_cells(self) -> None:
        """Two unfilled cells give two coordinates in row-major order."""
        compiled = easy_grid("""
                 1fr  1fr
            1fr  ..   A
            1fr  B    ..
        """)
        assert compiled.empty_cells == [CellCoordinates(0, 0), CellCoordinates(1, 1)]
        assert compiled.ordered_items() == ["A", "B"]

    def test_rejection_is_total(self) -> None:
        """Any error rejects the whole layout."""
        with pytest.raises(LayoutError) as excinfo:
            validate_rows(["1fr 2fr", "1fr A,B C,D", "2fr C,D C,D"])
        assert excinfo.value.kind == ErrorKind.NON_RECTANGULAR_SPAN
