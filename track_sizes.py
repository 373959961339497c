"""
Track size grammar for easygrid.

A track size is the sizing rule of one row or column. The grammar is a static
table of (kind, pattern, argument validator) entries, checked in order.
Functional forms come first so that a malformed argument reports the
specific functional error rather than a generic one.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Callable, NamedTuple

from layout_errors import ErrorKind, LayoutError

__all__ = [
    "TrackKind",
    "TRACK_GRAMMAR",
    "classify_size",
    "is_simple_size",
    "validate_size_specification",
    "validate_column_headers",
]


class TrackKind(Enum):
    """Kinds of track size accepted by the grammar."""

    PIXEL = "px"
    FRACTION = "fr"
    EM = "em"
    PERCENT = "%"
    VIEWPORT_HEIGHT = "vh"
    VIEWPORT_WIDTH = "vw"
    AUTO = "auto"
    MIN_CONTENT = "min-content"
    MAX_CONTENT = "max-content"
    MINMAX = "minmax"
    FIT_CONTENT = "fit-content"


class GrammarRule(NamedTuple):
    """One grammar entry.

    check_args is None for simple forms. For functional forms it receives the
    captured arguments and returns True when they are acceptable; otherwise
    the token fails with error.
    """

    kind: TrackKind
    pattern: re.Pattern[str]
    check_args: Callable[..., bool] | None = None
    error: ErrorKind = ErrorKind.INVALID_TRACK_SIZE


_SIMPLE_RULES: tuple[GrammarRule, ...] = (
    GrammarRule(TrackKind.PIXEL, re.compile(r"\d+px")),
    GrammarRule(TrackKind.FRACTION, re.compile(r"\d+fr")),
    GrammarRule(TrackKind.EM, re.compile(r"\d+em")),
    GrammarRule(TrackKind.PERCENT, re.compile(r"\d+%")),
    GrammarRule(TrackKind.VIEWPORT_HEIGHT, re.compile(r"\d+vh")),
    GrammarRule(TrackKind.VIEWPORT_WIDTH, re.compile(r"\d+vw")),
    GrammarRule(TrackKind.AUTO, re.compile(r"auto")),
    GrammarRule(TrackKind.MIN_CONTENT, re.compile(r"min-content")),
    GrammarRule(TrackKind.MAX_CONTENT, re.compile(r"max-content")),
)

# fit-content() only takes a length or a percentage
_LENGTH_OR_PERCENTAGE = frozenset({TrackKind.PIXEL, TrackKind.EM, TrackKind.PERCENT})


def _simple_kind(value: str) -> TrackKind | None:
    for rule in _SIMPLE_RULES:
        if rule.pattern.fullmatch(value):
            return rule.kind
    return None


def is_simple_size(value: str) -> bool:
    """Return True if value is a non-functional track size."""
    return _simple_kind(value) is not None


def _is_length_or_percentage(value: str) -> bool:
    return _simple_kind(value) in _LENGTH_OR_PERCENTAGE


def _both_simple(first: str, second: str) -> bool:
    return is_simple_size(first) and is_simple_size(second)


TRACK_GRAMMAR: tuple[GrammarRule, ...] = (
    GrammarRule(
        TrackKind.MINMAX,
        re.compile(r"minmax\((\S+),\s+(\S+)\)"),
        _both_simple,
        ErrorKind.INVALID_MINMAX,
    ),
    GrammarRule(
        TrackKind.FIT_CONTENT,
        re.compile(r"fit-content\((\S+)\)"),
        _is_length_or_percentage,
        ErrorKind.INVALID_FIT_CONTENT,
    ),
) + _SIMPLE_RULES


def classify_size(value: str) -> TrackKind:
    """
    Classify a track size token.

    Args:
        value: A single token, e.g. "1fr", "minmax(10px, auto)"

    Returns:
        The TrackKind of the token

    Raises:
        LayoutError: INVALID_MINMAX or INVALID_FIT_CONTENT when a functional
            form has unacceptable arguments, INVALID_TRACK_SIZE when nothing
            in the grammar matches
    """
    for rule in TRACK_GRAMMAR:
        match = rule.pattern.fullmatch(value)
        if match is None:
            continue
        if rule.check_args is not None and not rule.check_args(*match.groups()):
            raise LayoutError(rule.error, value=value)
        return rule.kind
    raise LayoutError(ErrorKind.INVALID_TRACK_SIZE, value=value)


def validate_size_specification(value: str) -> str:
    """Return value unchanged if it is a valid track size, else raise LayoutError."""
    classify_size(value)
    return value


def validate_column_headers(column_headers: list[str]) -> list[list[str]]:
    """Validate every header token, wrapping each as a singleton entry."""
    return [[validate_size_specification(header)] for header in column_headers]
