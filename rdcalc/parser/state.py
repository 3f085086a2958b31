"""Cursor and sticky error state shared by the precedence levels."""
import logging
from enum import Enum
from typing import Optional, TypedDict

from rdcalc.config import MAX_NESTING_DEPTH, NEGATION_BELOW_POWER, VALUE_BITS

logger = logging.getLogger(__name__)

# Same set as C isspace() in the "C" locale
WHITESPACE = " \t\n\v\f\r"


class ErrorKind(str, Enum):
    """Errors a parse can stop with. Only the first one is kept."""
    NONE = "none"
    SYNTAX = "syntax"
    DIVISION_BY_ZERO = "division_by_zero"
    UNCLOSED_PARENTHESIS = "unclosed_parenthesis"
    NESTING_TOO_DEEP = "nesting_too_deep"


class ParseState(TypedDict):
    text: str
    position: int
    error: ErrorKind
    error_offset: int
    depth: int
    max_depth: int
    value_bits: int
    negation_below_power: bool
    trace: bool


def build_initial_state(
    text: str,
    max_depth: Optional[int] = None,
    value_bits: Optional[int] = None,
    negation_below_power: Optional[bool] = None,
    trace: bool = False,
) -> ParseState:
    """Create the state for one parse of `text`; unset options come from config."""
    if value_bits is None:
        value_bits = VALUE_BITS
    if value_bits < 2:
        raise ValueError(f"value_bits must be at least 2, got {value_bits}")
    state = ParseState(
        text=text,
        position=0,
        error=ErrorKind.NONE,
        error_offset=0,
        depth=0,
        max_depth=MAX_NESTING_DEPTH if max_depth is None else max_depth,
        value_bits=value_bits,
        negation_below_power=(
            NEGATION_BELOW_POWER if negation_below_power is None else negation_below_power),
        trace=trace)
    return state


def fail(state: ParseState, kind: ErrorKind, offset: Optional[int] = None):
    """Record an error unless one is already set."""
    if failed(state):
        return
    state["error"] = kind
    state["error_offset"] = state["position"] if offset is None else offset
    logger.debug(f"{kind.value} at offset {state['error_offset']} in {state['text']!r}")


def skip_whitespace(state: ParseState):
    text = state["text"]
    position = state["position"]
    while position < len(text) and text[position] in WHITESPACE:
        position += 1
    state["position"] = position


def peek(state: ParseState) -> str:
    """Character under the cursor, or "" at end of input."""
    return state["text"][state["position"]:state["position"] + 1]


def descend(state: ParseState) -> bool:
    """
    Enter one level of nesting (a parenthesis or a right-recursive `^`).

    Returns False after flagging NESTING_TOO_DEEP when the configured
    limit is exceeded; the depth is left unchanged in that case. A limit
    of 0 means unlimited.
    """
    state["depth"] += 1
    if state["max_depth"] and state["depth"] > state["max_depth"]:
        state["depth"] -= 1
        fail(state, ErrorKind.NESTING_TOO_DEEP)
        return False
    return True


def ascend(state: ParseState):
    state["depth"] -= 1


def failed(state: ParseState) -> bool:
    return state["error"] is not ErrorKind.NONE
