# rdcalc/calculator.py

import logging
from typing import Optional, Tuple

from rdcalc.parser.levels import parse_input_string
from rdcalc.parser.state import ErrorKind, build_initial_state, failed

logger = logging.getLogger(__name__)


class ExpressionError(ValueError):
    """An expression that could not be evaluated, with where it went wrong."""

    def __init__(self, text: str, kind: ErrorKind, offset: int):
        self.text = text
        self.kind = kind
        self.offset = offset
        super().__init__(f"{kind.value} at offset {offset}")


def evaluate(
    text: str,
    max_depth: Optional[int] = None,
    value_bits: Optional[int] = None,
    negation_below_power: Optional[bool] = None,
    trace: bool = False,
) -> Tuple[int, ErrorKind, int]:
    """
    Evaluate an integer arithmetic expression in one pass.

    Returns (value, error_kind, offset). On success error_kind is
    ErrorKind.NONE and offset is the end of the input. On failure value
    must not be used and offset is where a diagnostic should point.
    """
    state = build_initial_state(
        text,
        max_depth=max_depth,
        value_bits=value_bits,
        negation_below_power=negation_below_power,
        trace=trace)
    value = parse_input_string(state)
    if failed(state):
        return 0, state["error"], state["error_offset"]
    return value, ErrorKind.NONE, state["position"]


def calculate(text: str, **options) -> int:
    """
    Evaluate an expression, raising ExpressionError if it is invalid.
    Supports +, -, *, /, ^, unary minus and parentheses.
    Examples:
        >>> calculate("1 + 2 * 3")
        7
        >>> calculate("-(10 + 20)")
        -30
    """
    value, kind, offset = evaluate(text, **options)
    if kind is not ErrorKind.NONE:
        raise ExpressionError(text, kind, offset)
    return value
