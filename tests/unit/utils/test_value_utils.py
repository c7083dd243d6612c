"""
Unit tests for the matrix cell value codec.

This module validates `format_value` and `parse_value`, which convert distance
cells to and from display text, plus the `add_costs` guard used by the solver.
Parsing is intentionally lenient: several spellings of infinity, blank input
and garbage all map onto the unreachable sentinel, while every finite number
has exactly one rendering that parses back to itself.
"""
import math
import pytest

from apsp_trace.utils.value_utils import (
    UNREACHABLE,
    INFINITY_GLYPH,
    is_reachable,
    add_costs,
    format_value,
    parse_value,
)


# ---------------------------------------------------------------------------
# format_value
# ---------------------------------------------------------------------------
def test_format_unreachable_is_infinity_glyph():
    assert format_value(UNREACHABLE) == "∞"
    assert format_value(UNREACHABLE) == INFINITY_GLYPH


def test_format_negative_infinity_has_leading_minus():
    assert format_value(-math.inf) == "-∞"


@pytest.mark.parametrize("value, expected", [
    (0.0, "0"),
    (3.0, "3"),
    (-4.0, "-4"),
    (7, "7"),
    (2.5, "2.5"),
    (-0.125, "-0.125"),
    (1e20, "1e+20"),
])
def test_format_finite_numbers(value, expected):
    """Integral values drop the '.0'; everything else uses the shortest float literal."""
    assert format_value(value) == expected


# ---------------------------------------------------------------------------
# parse_value
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("text", ["∞", "inf", "INF", "Inf", "infinity", "Infinity", "INFINITY", "", "   ", " ∞ "])
def test_parse_unreachable_spellings(text):
    assert parse_value(text) == UNREACHABLE


@pytest.mark.parametrize("text", ["abc", "nan", "NaN", "--1", "∞∞", "-∞", "-inf", "x3"])
def test_parse_garbage_maps_to_unreachable(text):
    """Input that does not start with a number is treated as 'no edge' rather than raising."""
    assert parse_value(text) == UNREACHABLE


@pytest.mark.parametrize("text, expected", [
    ("3abc", 3.0),
    ("1e", 1.0),
    ("3 4", 3.0),
    ("1_000", 1.0),
    ("5x", 5.0),
    (".5kg", 0.5),
    ("-2.5e1m", -25.0),
])
def test_parse_reads_leading_number(text, expected):
    assert parse_value(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("3", 3.0),
    ("  8  ", 8.0),
    ("-4", -4.0),
    ("2.5", 2.5),
    ("1e3", 1000.0),
])
def test_parse_numbers(text, expected):
    assert parse_value(text) == expected


def test_parse_signed_infinity_literal():
    assert parse_value("-Infinity") == -math.inf
    assert parse_value("+Infinity") == UNREACHABLE


@pytest.mark.parametrize("value", [0.0, -4.0, 3.5, 1e-7, 123456789.125, 1e20, -0.1, 42.0])
def test_format_then_parse_roundtrip(value):
    assert parse_value(format_value(value)) == value


# ---------------------------------------------------------------------------
# Reachability helpers
# ---------------------------------------------------------------------------
def test_is_reachable():
    assert is_reachable(0.0)
    assert is_reachable(-math.inf)
    assert not is_reachable(UNREACHABLE)


def test_add_costs_guards_unreachable_operands():
    assert add_costs(2.0, 3.0) == 5.0
    assert add_costs(UNREACHABLE, 3.0) == UNREACHABLE
    assert add_costs(-3.0, UNREACHABLE) == UNREACHABLE
    # inf + -inf would be NaN without the guard.
    assert add_costs(UNREACHABLE, -math.inf) == UNREACHABLE
