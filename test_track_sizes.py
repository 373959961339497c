"""Tests for track_sizes module."""

import pytest

from layout_errors import ErrorKind, LayoutError
from track_sizes import (
    TRACK_GRAMMAR,
    TrackKind,
    classify_size,
    is_simple_size,
    validate_column_headers,
    validate_size_specification,
)


class TestSimpleSizes:
    """Tests for non-functional track sizes."""

    @pytest.mark.parametrize(
        "value, kind",
        [
            ("1px", TrackKind.PIXEL),
            ("23fr", TrackKind.FRACTION),
            ("20em", TrackKind.EM),
            ("2%", TrackKind.PERCENT),
            ("50vh", TrackKind.VIEWPORT_HEIGHT),
            ("100vw", TrackKind.VIEWPORT_WIDTH),
            ("auto", TrackKind.AUTO),
            ("min-content", TrackKind.MIN_CONTENT),
            ("max-content", TrackKind.MAX_CONTENT),
        ],
    )
    def test_classifies_simple_sizes(self, value: str, kind: TrackKind) -> None:
        """Each simple form is accepted and classified."""
        assert classify_size(value) == kind
        assert validate_size_specification(value) == value
        assert is_simple_size(value)

    @pytest.mark.parametrize("value", ["2", "1.5fr", "-1px", "px", "1 px", "Auto", "1rem", ""])
    def test_rejects_invalid_sizes(self, value: str) -> None:
        """Decimals, negatives, missing units and unknown keywords are rejected."""
        with pytest.raises(LayoutError, match="invalid grid specification") as excinfo:
            validate_size_specification(value)
        assert excinfo.value.kind == ErrorKind.INVALID_TRACK_SIZE
        assert excinfo.value.value == value


class TestFunctionalSizes:
    """Tests for minmax() and fit-content()."""

    def test_minmax(self) -> None:
        """minmax accepts any two simple sizes."""
        assert classify_size("minmax(2%, max-content)") == TrackKind.MINMAX
        assert classify_size("minmax(1fr, 2fr)") == TrackKind.MINMAX
        assert not is_simple_size("minmax(1fr, 2fr)")

    def test_fit_content(self) -> None:
        """fit-content accepts a length or percentage."""
        assert classify_size("fit-content(2%)") == TrackKind.FIT_CONTENT
        assert classify_size("fit-content(40px)") == TrackKind.FIT_CONTENT
        assert classify_size("fit-content(3em)") == TrackKind.FIT_CONTENT

    def test_invalid_minmax(self) -> None:
        """minmax with a non-size argument is an invalid minmax."""
        with pytest.raises(LayoutError, match="invalid minmax") as excinfo:
            validate_size_specification("minmax(2fr, 2)")
        assert excinfo.value.kind == ErrorKind.INVALID_MINMAX

    def test_nested_minmax_rejected(self) -> None:
        """minmax arguments cannot themselves be functional."""
        with pytest.raises(LayoutError) as excinfo:
            validate_size_specification("minmax(fit-content(1px), 2fr)")
        assert excinfo.value.kind == ErrorKind.INVALID_MINMAX

    @pytest.mark.parametrize("value", ["fit-content(2fr)", "fit-content(auto)", "fit-content(10vh)"])
    def test_invalid_fit_content(self, value: str) -> None:
        """fit-content rejects fractions, keywords and viewport units."""
        with pytest.raises(LayoutError, match="invalid fit-content") as excinfo:
            validate_size_specification(value)
        assert excinfo.value.kind == ErrorKind.INVALID_FIT_CONTENT

    @pytest.mark.parametrize(
        "value", ["fit-content(2fr, 1em)", "minmax(2fr, 2, 3%)", "minmax(1px)", "minmax(1px,2px)"]
    )
    def test_wrong_argument_count_is_generic(self, value: str) -> None:
        """A functional form with the wrong arguments is a generic grid error."""
        with pytest.raises(LayoutError, match="invalid grid") as excinfo:
            validate_size_specification(value)
        assert excinfo.value.kind == ErrorKind.INVALID_TRACK_SIZE


class TestGrammarTable:
    """Tests for the grammar table itself."""

    def test_functional_rules_come_first(self) -> None:
        """Functional forms are checked before simple forms."""
        kinds = [rule.kind for rule in TRACK_GRAMMAR]
        assert kinds[:2] == [TrackKind.MINMAX, TrackKind.FIT_CONTENT]
        assert set(kinds) == set(TrackKind)

    def test_only_functional_rules_check_arguments(self) -> None:
        """Simple rules carry no argument validator."""
        for rule in TRACK_GRAMMAR:
            if rule.kind in (TrackKind.MINMAX, TrackKind.FIT_CONTENT):
                assert rule.check_args is not None
            else:
                assert rule.check_args is None


class TestValidateColumnHeaders:
    """Tests for validate_column_headers."""

    def test_wraps_each_header(self) -> None:
        """Each header becomes a singleton entry."""
        headers = ["1px", "20em", "23fr", "2%", "min-content", "max-content", "auto"]
        assert validate_column_headers(headers) == [[h] for h in headers]

    def test_validates_functional_headers(self) -> None:
        """Functional headers pass through unchanged."""
        assert validate_column_headers(["1px", "fit-content(2%)", "minmax(2%, max-content)"]) == [
            ["1px"],
            ["fit-content(2%)"],
            ["minmax(2%, max-content)"],
        ]

    def test_throws_on_invalid_header(self) -> None:
        """One bad header rejects the whole header row."""
        with pytest.raises(LayoutError, match="invalid fit-content"):
            validate_column_headers(["1px", "fit-content(2fr)"])
