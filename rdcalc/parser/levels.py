"""
Precedence levels of the expression grammar, lowest to highest.

There is one function per level and each one gets its operands by calling
the next higher level, so the call graph is the precedence table:

    add_subtract -> mul_div -> exponent -> unary_minus -> parenthesized -> literal

A parenthesized expression restarts at the lowest level, which is what
allows unlimited nesting. Values are computed while parsing; no tokens or
tree nodes are ever built.

Every level checks the state's error right after each sub-call and returns
immediately once it is set. The value returned alongside an error is
meaningless.

With `negation_below_power` set, unary minus sits between mul_div and
exponent instead, and the exponent after `^` is parsed at the unary minus
level. That makes "-2^4" mean -(2^4) while "2^-(1+3)" stays valid.
"""
from typing import Optional

from rdcalc.observability.telemetry import log_operation
from rdcalc.parser.arithmetic import integer_power, max_value, truncating_divide, wrap
from rdcalc.parser.state import (
    ErrorKind,
    ParseState,
    ascend,
    descend,
    fail,
    failed,
    peek,
    skip_whitespace,
)

DIGITS = "0123456789"


def _record(state: ParseState, operator: str, left: Optional[int], right: int,
            result: int, offset: int):
    if state["trace"]:
        log_operation(operator, left, right, result, offset)


def parse_add_subtract(state: ParseState) -> int:
    """Binary + and - (lowest precedence, left-associative)."""
    result = parse_mul_div(state)
    if failed(state):
        return result

    # "1+2+3-4" is folded left to right in this loop
    while True:
        skip_whitespace(state)
        operator = peek(state)
        if operator not in ("+", "-"):
            # Whoever called us decides whether this character is valid
            return result

        offset = state["position"]
        state["position"] += 1
        operand = parse_mul_div(state)
        if failed(state):
            return result

        left = result
        if operator == "+":
            result = wrap(left + operand, state["value_bits"])
        else:
            result = wrap(left - operand, state["value_bits"])
        _record(state, operator, left, operand, result, offset)


def parse_mul_div(state: ParseState) -> int:
    """Binary * and / (left-associative). Division truncates toward zero."""
    result = _factor(state)
    if failed(state):
        return 0

    while True:
        skip_whitespace(state)
        operator = peek(state)
        if operator not in ("*", "/"):
            return result

        offset = state["position"]
        state["position"] += 1
        skip_whitespace(state)
        operand_offset = state["position"]
        operand = _factor(state)
        if failed(state):
            return 0

        left = result
        if operator == "*":
            result = wrap(left * operand, state["value_bits"])
        elif operand == 0:
            fail(state, ErrorKind.DIVISION_BY_ZERO, operand_offset)
            return 0
        else:
            result = truncating_divide(left, operand, state["value_bits"])
        _record(state, operator, left, operand, result, offset)


def parse_exponent(state: ParseState) -> int:
    """
    Binary ^ (right-associative).

    Instead of looping like the levels below, the exponent is parsed by
    recursing into this level, so "2^3^2" is 2^(3^2) = 512. Each recursion
    counts towards the nesting limit.
    """
    skip_whitespace(state)
    base_offset = state["position"]
    base = _base(state)
    if failed(state):
        return base

    skip_whitespace(state)
    if peek(state) != "^":
        return base

    offset = state["position"]
    if not descend(state):
        return base
    state["position"] += 1
    exponent = _exponent(state)
    ascend(state)
    if failed(state):
        return base

    result = integer_power(base, exponent, state["value_bits"])
    if result is None:
        # 0^-n would be 1 / 0^n
        fail(state, ErrorKind.DIVISION_BY_ZERO, base_offset)
        return 0
    _record(state, "^", base, exponent, result, offset)
    return result


def parse_unary_minus(state: ParseState) -> int:
    """Prefix unary -, at most one per operand."""
    skip_whitespace(state)
    if peek(state) != "-":
        return _negatable(state)

    offset = state["position"]
    state["position"] += 1
    operand = _negatable(state)
    if failed(state):
        return operand

    result = wrap(-operand, state["value_bits"])
    _record(state, "-", None, operand, result, offset)
    return result


def parse_parenthesized(state: ParseState) -> int:
    """A literal, or a full expression between parentheses."""
    skip_whitespace(state)
    if peek(state) != "(":
        return parse_literal(state)

    if not descend(state):
        return 0
    state["position"] += 1
    result = parse_add_subtract(state)
    ascend(state)
    if failed(state):
        return result

    skip_whitespace(state)
    if peek(state) != ")":
        fail(state, ErrorKind.UNCLOSED_PARENTHESIS)
        return 0
    state["position"] += 1
    return result


def parse_literal(state: ParseState) -> int:
    """
    Unsigned decimal integer literal.

    Signs are left to parse_unary_minus. Literals above the largest
    representable value saturate to it.
    """
    skip_whitespace(state)
    text = state["text"]
    start = end = state["position"]
    while end < len(text) and text[end] in DIGITS:
        end += 1
    if end == start:
        fail(state, ErrorKind.SYNTAX)
        return 0
    state["position"] = end

    limit = max_value(state["value_bits"])
    digits = text[start:end].lstrip("0")
    if len(digits) > len(str(limit)):
        return limit
    return min(int(digits or "0"), limit)


def parse_input_string(state: ParseState) -> int:
    """Parse and evaluate the whole input; anything left over is a syntax error."""
    result = parse_add_subtract(state)
    if failed(state):
        return 0

    # Leftover input means the outermost level met something it can't continue with
    skip_whitespace(state)
    if state["position"] < len(state["text"]):
        fail(state, ErrorKind.SYNTAX)
        return 0
    return result


# Operand wiring that differs with the placement of unary minus

def _factor(state: ParseState) -> int:
    if state["negation_below_power"]:
        return parse_unary_minus(state)
    return parse_exponent(state)


def _base(state: ParseState) -> int:
    if state["negation_below_power"]:
        return parse_parenthesized(state)
    return parse_unary_minus(state)


def _exponent(state: ParseState) -> int:
    if state["negation_below_power"]:
        return parse_unary_minus(state)
    return parse_exponent(state)


def _negatable(state: ParseState) -> int:
    if state["negation_below_power"]:
        return parse_exponent(state)
    return parse_parenthesized(state)
