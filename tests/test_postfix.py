"""Test evaluation of Reverse Polish Notation tokens."""
from typing import List

import pytest

from arithmetic_evaluator.common.models import Error, Success
from arithmetic_evaluator.common.operators import SYMBOLS
from arithmetic_evaluator.engine.calculator import CalculatorEngine
from arithmetic_evaluator.parser.postfix import OPERATIONS, evaluate_rpn
from arithmetic_evaluator.parser.tokenizer import LeftParenToken, NumberToken, OperatorToken, Token


def _rpn(*items: str) -> List[Token]:
    """Build RPN tokens from strings: operator symbols or numeric literals."""
    tokens: List[Token] = []
    for item in items:
        if item in SYMBOLS:
            tokens.append(OperatorToken(operator=SYMBOLS[item], symbol=item))
        else:
            tokens.append(NumberToken(value=float(item), text=item))
    return tokens


@pytest.fixture
def engine() -> CalculatorEngine:
    return CalculatorEngine()


@pytest.mark.parametrize("rpn,expected", [
    (_rpn("3", "4", "+"), 7.0),
    (_rpn("10", "4", "-"), 6.0),
    (_rpn("10", "4", "−"), 6.0),
    (_rpn("3", "5", "×"), 15.0),
    (_rpn("8", "2", "/"), 4.0),
    (_rpn("2", "10", "^"), 1024.0),
    (_rpn("7", "3", "mod"), 1.0),
    (_rpn("3", "4", "2", "*", "+"), 11.0),
    (_rpn("42"), 42.0),
])
def test_evaluate_rpn_valid(engine, rpn, expected):
    """The right operand is popped first, so non-commutative operators keep their order."""
    result = evaluate_rpn(rpn, engine)
    assert isinstance(result, Success)
    assert result.value == expected


@pytest.mark.parametrize("rpn", [
    _rpn("3", "+"),
    _rpn("+"),
    _rpn("3", "4"),
    _rpn(),
])
def test_evaluate_rpn_invalid_expression(engine, rpn):
    """Too few operands, or leftover values, give "Invalid expression"."""
    assert evaluate_rpn(rpn, engine) == Error(message="Invalid expression")


def test_evaluate_rpn_rejects_parenthesis(engine):
    """A stray parenthesis token is not silently skipped."""
    rpn = [NumberToken(value=1.0, text="1"), LeftParenToken()]
    assert isinstance(evaluate_rpn(rpn, engine), Error)


def test_evaluate_rpn_short_circuits_on_first_error(engine):
    """The first domain error is returned verbatim, later operators are not applied."""
    result = evaluate_rpn(_rpn("1", "0", "/", "0", "^", "5", "mod"), engine)
    assert result == Error(message="Division by zero")


def test_every_operator_has_an_operation():
    """Each operator symbol maps to an engine operation."""
    assert set(OPERATIONS) == set(SYMBOLS.values())
