"""Fixed-width signed integer arithmetic (two's complement wrapping)."""
from typing import Optional


def max_value(bits: int) -> int:
    return (1 << (bits - 1)) - 1


def wrap(value: int, bits: int) -> int:
    """Reduce `value` into the signed range of `bits` bits."""
    value &= (1 << bits) - 1
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def truncating_divide(left: int, right: int, bits: int) -> int:
    """Integer division rounding toward zero, as C does. `right` must be non-zero."""
    quotient = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        quotient = -quotient
    return wrap(quotient, bits)


def integer_power(base: int, exponent: int, bits: int) -> Optional[int]:
    """
    Integer exponentiation with the evaluator's truncating rules.

    Returns None when the result would need a division by zero
    (zero base, negative exponent). Negative exponents of any other
    base truncate to 0, and anything to the power 0 is 1.
    """
    if exponent == 0:
        return 1
    if exponent < 0:
        return None if base == 0 else 0
    # Modular exponentiation gives the same bits as repeated wrapping multiplication
    return wrap(pow(base, exponent, 1 << bits), bits)
