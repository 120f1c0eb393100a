"""Property-based tests for the evaluate entry point."""
import math

from hypothesis import given, strategies as st
import pytest

from arithmetic_evaluator.common.models import Error, Success
from arithmetic_evaluator.parser.expression import evaluate


# Characters the tokenizer understands, plus a few it must reject
EXPRESSION_TEXT = st.text(alphabet="0123456789.,eE+-−*×/÷^()mod \tx$", max_size=40)

SMALL_INTS = st.integers(min_value=-1000, max_value=1000)


@st.composite
def well_formed(draw, depth: int = 0) -> str:
    """A syntactically valid expression built from literals, operators and parentheses."""
    if depth > 3 or draw(st.booleans()):
        return str(draw(st.integers(min_value=0, max_value=10_000)))
    left = draw(well_formed(depth + 1))
    right = draw(well_formed(depth + 1))
    op = draw(st.sampled_from(["+", "-", "*", "/", "^", " mod ", "−", "×", "÷"]))
    expr = f"{left}{op}{right}"
    return f"({expr})" if draw(st.booleans()) else expr


@given(EXPRESSION_TEXT)
def test_arbitrary_text_never_raises(expr: str) -> None:
    """Any input yields a result; a Success value is always finite."""
    result = evaluate(expr)
    assert isinstance(result, (Success, Error))
    if isinstance(result, Success):
        assert math.isfinite(result.value)


@given(well_formed())
def test_well_formed_never_raises(expr: str) -> None:
    """Well-formed expressions evaluate to a finite value or a domain error."""
    result = evaluate(expr)
    assert isinstance(result, (Success, Error))
    if isinstance(result, Success):
        assert math.isfinite(result.value)


@given(EXPRESSION_TEXT)
def test_evaluate_is_idempotent(expr: str) -> None:
    """Evaluating twice gives bit-identical results."""
    first = evaluate(expr)
    second = evaluate(expr)
    assert type(first) is type(second)
    if isinstance(first, Success):
        assert first.value.hex() == second.value.hex()
    else:
        assert first.message == second.message


@given(SMALL_INTS, SMALL_INTS, SMALL_INTS)
def test_multiplication_binds_tighter_than_addition(a: int, b: int, c: int) -> None:
    """a + b * c is a + (b * c), and a * b + c is (a * b) + c."""
    assert evaluate(f"{a}+{b}*{c}") == Success(value=a + b * c)
    assert evaluate(f"{a}*{b}+{c}") == Success(value=a * b + c)


@given(SMALL_INTS, SMALL_INTS, SMALL_INTS)
def test_subtraction_is_left_associative(a: int, b: int, c: int) -> None:
    """a - b - c is (a - b) - c."""
    assert evaluate(f"{a}-{b}-{c}") == Success(value=(a - b) - c)


@given(
    st.integers(min_value=1, max_value=4),
    st.integers(min_value=1, max_value=3),
    st.integers(min_value=1, max_value=3),
)
def test_power_is_right_associative(a: int, b: int, c: int) -> None:
    """a ^ b ^ c is a ^ (b ^ c)."""
    result = evaluate(f"{a}^{b}^{c}")
    assert isinstance(result, Success)
    assert result.value == pytest.approx(float(a ** (b ** c)))


@given(SMALL_INTS)
def test_unary_minus_before_parenthesis(a: int) -> None:
    """-(x) equals 0 - x."""
    assert evaluate(f"-({a})") == Success(value=float(-a))
