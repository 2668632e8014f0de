import operator

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.postfix import PostfixError, apply_operator, evaluate_postfix

digits = st.integers(min_value=0, max_value=9)

PY_OPERATORS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "^": operator.xor,
}


@given(digits, digits, st.sampled_from(sorted(PY_OPERATORS)))
def test_single_operation(a, b, op):
    assert evaluate_postfix(f"{a}{b}{op}") == PY_OPERATORS[op](a, b)


@given(digits, st.integers(min_value=1, max_value=9))
def test_division_of_digits(a, b):
    assert evaluate_postfix(f"{a}{b}/") == a // b


def test_longer_expression():
    assert evaluate_postfix("231*+9-") == 2 + 3 * 1 - 9
    assert evaluate_postfix("2 3 1 * + 9 -") == evaluate_postfix("231*+9-")


def test_division_truncates_toward_zero():
    assert apply_operator(-7, 2, "/") == -3
    assert apply_operator(7, -2, "/") == -3


def test_caret_is_xor():
    assert apply_operator(5, 3, "^") == 5 ^ 3


def test_top_of_stack_is_result():
    assert evaluate_postfix("48") == 8


def test_unknown_operator():
    with pytest.raises(PostfixError):
        apply_operator(1, 2, "%")


@pytest.mark.parametrize("expression", ["", "2+", "+", "2a+"])
def test_malformed_expressions(expression):
    with pytest.raises(PostfixError):
        evaluate_postfix(expression)


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate_postfix("10/")