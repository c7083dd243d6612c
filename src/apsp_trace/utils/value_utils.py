import math
import re

# Semantic "no edge / no known path" marker for every distance cell.
UNREACHABLE = math.inf

INFINITY_GLYPH = "∞"

# Every textual spelling that maps onto the unreachable sentinel (compared lower-cased).
_UNREACHABLE_SPELLINGS = frozenset({INFINITY_GLYPH, "inf", "infinity", ""})

# Leading decimal literal (or signed "Infinity"); trailing text after it is ignored.
_NUMBER_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

# Integral floats at or above this magnitude are rendered with repr() instead of as ints.
_INT_RENDER_LIMIT = 1e16


def is_reachable(value: float) -> bool:
    """
    Checks whether a distance cell holds a usable cost.

    Parameters
    ----------
    value : float
        A distance or edge cost.

    Returns
    -------
    bool
        False only for the unreachable sentinel (positive infinity).
    """
    return value != UNREACHABLE


def add_costs(cost_a: float, cost_b: float) -> float:
    """
    Adds two path costs, propagating the unreachable sentinel.

    The sentinel never enters the arithmetic: if either operand is
    unreachable the result is unreachable, otherwise it is the plain sum.
    Every relaxation in the solver goes through this guard (or its
    kernel-level equivalent).

    Parameters
    ----------
    cost_a : float
        The first path cost.
    cost_b : float
        The second path cost.

    Returns
    -------
    float
        `cost_a + cost_b`, or `UNREACHABLE`.
    """
    if not is_reachable(cost_a) or not is_reachable(cost_b):
        return UNREACHABLE
    return cost_a + cost_b


def format_value(value: float) -> str:
    """
    Renders a matrix cell for display.

    Parameters
    ----------
    value : float
        The cell value.

    Returns
    -------
    str
        `"∞"` for the unreachable sentinel, `"-∞"` for negative infinity,
        an integer literal for integral values (e.g. `3.0` -> `"3"`), and the
        shortest round-tripping float literal otherwise.
    """
    if value == UNREACHABLE:
        return INFINITY_GLYPH
    if value == -math.inf:
        return f"-{INFINITY_GLYPH}"

    as_float = float(value)
    if as_float.is_integer() and abs(as_float) < _INT_RENDER_LIMIT:
        return str(int(as_float))
    return repr(as_float)


def parse_value(text: str) -> float:
    """
    Parses a textual matrix cell into a cost.

    Parsing is lenient on purpose: the infinity glyph, "inf", "infinity"
    (any case) and blank input all mean "no edge", and so does anything that
    does not start with a number. Otherwise the longest leading number is
    read and anything after it is ignored, so `"3abc"` is 3 and `"1_000"` is 1.
    This function never raises.

    Parameters
    ----------
    text : str
        The raw cell text.

    Returns
    -------
    float
        The parsed cost, or `UNREACHABLE`.
    """
    trimmed = text.strip()
    if trimmed.lower() in _UNREACHABLE_SPELLINGS:
        return UNREACHABLE

    match = _NUMBER_PREFIX.match(trimmed)
    if match is None:
        return UNREACHABLE

    # float() reads "Infinity" and "-Infinity" directly.
    return float(match.group(0))
