"""Tests for the precedence levels and the top-level driver."""
import pytest
from rdcalc.calculator import calculate, evaluate
from rdcalc.parser.levels import (
    parse_add_subtract,
    parse_exponent,
    parse_input_string,
    parse_literal,
    parse_parenthesized,
)
from rdcalc.parser.arithmetic import wrap
from rdcalc.parser.state import ErrorKind, build_initial_state


def test_basic_operations():
    """Test the four binary operators and exponentiation."""
    assert calculate("1 + 1") == 2
    assert calculate("5 - 2") == 3
    assert calculate("3 * 4") == 12
    assert calculate("10 / 2") == 5
    assert calculate("2 ^ 3") == 8


def test_left_associativity():
    """Same-precedence operators group left to right."""
    assert calculate("1-2+3") == 2
    assert calculate("100/10/5") == 2
    assert calculate("2*6/4") == 3


def test_right_associativity_of_exponent():
    """2^3^2 is 2^(3^2), not (2^3)^2."""
    assert calculate("2^3^2") == 512
    assert calculate("(2^3)^2") == 64


def test_precedence():
    """Test correct order of operations."""
    assert calculate("1+2*3") == 7
    assert calculate("(1+2)*3") == 9
    assert calculate("10 - 4 / 2") == 8
    assert calculate("2*3^2") == 18


def test_nested_parentheses():
    assert calculate("((((5))))") == 5
    assert calculate("((2 + 3) * (4 - 1))") == 15


def test_worked_example():
    assert calculate("1 + 5 * (8-(3+5*(10+20))) - 2^5^2") == -33555156


def test_unary_minus():
    """Test unary minus, alone and with parentheses."""
    assert calculate("-5") == -5
    assert calculate("-(10+20)") == -30
    assert calculate("3 * -2") == -6
    assert calculate("-(-5)") == 5


def test_unary_minus_binds_tighter_than_exponent_by_default():
    """-2^4 is (-2)^4."""
    assert calculate("-2^4", negation_below_power=False) == 16
    assert calculate("-2^3", negation_below_power=False) == -8
    assert calculate("-2^-(1+3)", negation_below_power=False) == 0


def test_negation_below_power():
    """With negation below power, -2^4 is -(2^4) and negative exponents still parse."""
    assert calculate("-2^4", negation_below_power=True) == -16
    assert calculate("2^-(1+3)", negation_below_power=True) == 0
    assert calculate("-2^-(1+3)", negation_below_power=True) == 0
    assert calculate("2^3^2", negation_below_power=True) == 512
    assert calculate("(-2)^4", negation_below_power=True) == 16
    assert calculate("1 + 5 * (8-(3+5*(10+20))) - 2^5^2",
                     negation_below_power=True) == -33555156


def test_consecutive_minus_signs():
    """Only one unary minus per operand; literals never carry a sign."""
    assert calculate("2--5") == 7
    assert calculate("2 - -5") == 7
    for expression in ("--5", "2---5", "2----5", "--(5)", "---5"):
        value, kind, _ = evaluate(expression)
        assert kind is ErrorKind.SYNTAX, expression


def test_plus_sign_is_not_a_literal_prefix():
    value, kind, offset = evaluate("+5")
    assert kind is ErrorKind.SYNTAX
    assert offset == 0


def test_whitespace_is_ignored_between_tokens():
    assert calculate("  2  +  3  ") == 5
    assert calculate("\t( 1\n+\r2 )\f*\v3") == 9
    assert calculate(" - ( 4 ) ^ 2 ") == 16


def test_division_truncates_toward_zero():
    assert calculate("7/2") == 3
    assert calculate("-7/2") == -3
    assert calculate("7/-2") == -3
    assert calculate("-7/-2") == 3


def test_exponent_edge_cases():
    """Test integer exponent rules."""
    assert calculate("0^0") == 1
    assert calculate("2^0") == 1
    assert calculate("2^-1") == 0
    assert calculate("1^-1") == 0
    assert calculate("(-3)^3") == -27
    value, kind, _ = evaluate("0^-1")
    assert kind is ErrorKind.DIVISION_BY_ZERO


def test_values_wrap_at_value_width():
    """Arithmetic wraps like 64-bit two's complement integers."""
    assert calculate("9223372036854775807 + 1") == -9223372036854775808
    assert calculate("2^63") == -9223372036854775808
    assert calculate("2^64") == 0
    assert calculate("-9223372036854775807 - 1") == -9223372036854775808
    assert calculate("(-9223372036854775807 - 1) / -1") == -9223372036854775808
    # Huge exponents must not loop exponent-many times
    assert calculate("3^1000000000000") == wrap(pow(3, 10 ** 12, 1 << 64), 64)


def test_custom_value_width():
    assert calculate("127 + 1", value_bits=8) == -128
    assert calculate("16 * 16", value_bits=8) == 0
    assert calculate("1000", value_bits=8) == 127


def test_large_literals_saturate():
    assert calculate("99999999999999999999") == 9223372036854775807
    assert calculate("9223372036854775808") == 9223372036854775807
    assert calculate("0009") == 9
    assert calculate("1" + "0" * 5000) == 9223372036854775807


def test_literal_level_reads_digits_only():
    state = build_initial_state("  42abc")
    assert parse_literal(state) == 42
    assert state["position"] == 4
    assert state["error"] is ErrorKind.NONE


def test_level_returns_control_at_unknown_character():
    """A level stops at the first character it has no rule for and leaves it unconsumed."""
    state = build_initial_state("1 + 2 )")
    assert parse_add_subtract(state) == 3
    assert state["error"] is ErrorKind.NONE
    assert state["text"][state["position"]:].strip() == ")"


def test_exponent_level_without_operator():
    state = build_initial_state("7 * 2")
    assert parse_exponent(state) == 7
    assert state["position"] == 2


def test_parenthesized_level_consumes_closing_parenthesis():
    state = build_initial_state("( 1 + 2 ) * 3")
    assert parse_parenthesized(state) == 3
    assert state["position"] == 9
    assert state["depth"] == 0


def test_driver_consumes_whole_input():
    state = build_initial_state("  1 + 2   ")
    assert parse_input_string(state) == 3
    assert state["position"] == len("  1 + 2   ")


def test_evaluate_reports_end_offset_on_success():
    assert evaluate("6 * 7 ") == (42, ErrorKind.NONE, 6)


def test_invalid_value_bits():
    with pytest.raises(ValueError, match="value_bits"):
        build_initial_state("1", value_bits=1)
