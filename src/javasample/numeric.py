"""
Fixed-width integer rules for the sample program.

Python integers are unbounded, the sample's are not. This module pins the
two widths the sample uses:
    - int  : 32-bit two's complement
    - long : 64-bit two's complement

and the one widening it performs (long -> double).

Values handed in from outside are CHECKED (out of range is an error).
Results of arithmetic are WRAPPED (overflow rolls over, as long addition does).
"""

INT_BITS = 32
LONG_BITS = 64

INT_MIN = -(2 ** (INT_BITS - 1))
INT_MAX = 2 ** (INT_BITS - 1) - 1
LONG_MIN = -(2 ** (LONG_BITS - 1))
LONG_MAX = 2 ** (LONG_BITS - 1) - 1


class NumericRangeError(ValueError):
    """Raised when an integer does not fit the declared width."""
    pass


def _check(value: int, low: int, high: int, kind: str) -> int:
    # bool is an int subclass; True is not a number here
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{kind} value must be an int, got {type(value).__name__}")
    if value < low or value > high:
        raise NumericRangeError(f"{value} does not fit in {kind} [{low}, {high}]")
    return value


def as_int(value: int) -> int:
    """Validate a 32-bit int value and return it unchanged."""
    return _check(value, INT_MIN, INT_MAX, "int")


def as_long(value: int) -> int:
    """Validate a 64-bit long value and return it unchanged."""
    return _check(value, LONG_MIN, LONG_MAX, "long")


def wrap_long(value: int) -> int:
    """
    Reduce an arbitrary Python int to 64-bit two's complement.

    Examples:
        wrap_long(LONG_MAX + 1) == LONG_MIN
        wrap_long(-1) == -1
    """
    value &= (1 << LONG_BITS) - 1
    if value > LONG_MAX:
        value -= 1 << LONG_BITS
    return value


def long_add(x: int, y: int) -> int:
    """Add two longs with overflow wrap-around."""
    return wrap_long(as_long(x) + as_long(y))


def to_double(value: int) -> float:
    """Widen a long to a 64-bit float (nearest representable value)."""
    return float(as_long(value))


__all__ = [
    "INT_MIN",
    "INT_MAX",
    "LONG_MIN",
    "LONG_MAX",
    "NumericRangeError",
    "as_int",
    "as_long",
    "wrap_long",
    "long_add",
    "to_double",
]
