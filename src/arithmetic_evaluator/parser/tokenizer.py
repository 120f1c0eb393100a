"""Split raw expression text into typed tokens."""
import math
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from arithmetic_evaluator.common.errors import (
    InvalidCharacterError,
    InvalidNumberError,
    MalformedExpressionError,
)
from arithmetic_evaluator.common.operators import SYMBOLS, Operator


class NumberToken(BaseModel):
    """A numeric literal, already parsed."""

    model_config = ConfigDict(frozen=True)

    value: float = Field(..., description="Parsed value of the literal")
    text: str = Field(..., description="Literal as read from the input, '.' as decimal point")
    position: int = Field(default=0, ge=0, description="Index of the first character in the input")


class OperatorToken(BaseModel):
    """A binary operator."""

    model_config = ConfigDict(frozen=True)

    operator: Operator
    symbol: str = Field(..., description="Spelling used in the input, e.g. '*' for multiply")
    position: int = Field(default=0, ge=0)


class LeftParenToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    position: int = Field(default=0, ge=0)


class RightParenToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    position: int = Field(default=0, ge=0)


Token = Union[NumberToken, OperatorToken, LeftParenToken, RightParenToken]

# Single characters that always end a numeric literal and form a token of their own
SINGLE_CHAR_OPERATORS = frozenset("+−-×*÷/^")
MINUS_SYMBOLS = frozenset("-−")


def _is_number_char(char: str) -> bool:
    return char.isdecimal() or char in ".,"


def _make_number(text: str, position: int) -> NumberToken:
    """
    Build a number token from an accumulated literal.

    :param str text: Literal text with '.' as decimal point
    :param int position: Index of the literal's first character

    :return: Parsed number token
    :rtype: NumberToken
    :raises InvalidNumberError: If the text is not a finite float (e.g. "1.2.3", "1e", "1e999")
    """
    try:
        value: float = float(text)
    except ValueError:
        raise InvalidNumberError(text) from None
    if not math.isfinite(value):
        raise InvalidNumberError(text)
    return NumberToken(value=value, text=text, position=position)


def scan(expression: str) -> List[Token]:
    """
    Read the expression left to right into raw tokens, without unary-minus handling.

    Both '.' and ',' are accepted as decimal point. An 'E'/'e' directly after digits
    starts a scientific exponent, optionally signed ("1.5E+10", "2e-05").
    Whitespace separates tokens.

    :param str expression: Raw expression text

    :return: Tokens in input order
    :rtype: List[Token]
    :raises InvalidCharacterError: On the first character that belongs to no token
    :raises InvalidNumberError: If an accumulated literal is not a valid number
    """
    tokens: List[Token] = []
    buffer: str = ""
    start: int = 0
    i: int = 0

    while i < len(expression):
        char = expression[i]

        if _is_number_char(char):
            if not buffer:
                start = i
            buffer += "." if char == "," else char
            i += 1
            continue

        if char in "Ee" and buffer:
            buffer += char
            i += 1
            if i < len(expression) and expression[i] in "+-":
                buffer += expression[i]
                i += 1
            continue

        # Anything else ends the pending literal
        if buffer:
            tokens.append(_make_number(buffer, start))
            buffer = ""

        if char.isspace():
            i += 1
        elif char in SINGLE_CHAR_OPERATORS:
            tokens.append(OperatorToken(operator=SYMBOLS[char], symbol=char, position=i))
            i += 1
        elif char == "(":
            tokens.append(LeftParenToken(position=i))
            i += 1
        elif char == ")":
            tokens.append(RightParenToken(position=i))
            i += 1
        elif expression[i : i + 3].lower() == "mod":
            tokens.append(OperatorToken(operator=Operator.MODULO, symbol="mod", position=i))
            i += 3
        else:
            raise InvalidCharacterError(char, i)

    if buffer:
        tokens.append(_make_number(buffer, start))

    return tokens


def resolve_unary_minus(tokens: List[Token]) -> List[Token]:
    """
    Rewrite unary minus signs so that every remaining operator is binary.

    A minus is unary at the start, after '(' or after another operator. Followed by a
    number it is folded into the literal ("-", "5" -> "-5"); otherwise it becomes a
    subtraction from zero ("-", "(" -> "0", "-", "(").

    :param List[Token] tokens: Raw tokens from ``scan``

    :return: Tokens with unary minus signs resolved
    :rtype: List[Token]
    """
    result: List[Token] = []
    i: int = 0

    while i < len(tokens):
        token = tokens[i]
        previous: Optional[Token] = tokens[i - 1] if i > 0 else None
        is_unary = (
            isinstance(token, OperatorToken)
            and token.symbol in MINUS_SYMBOLS
            and (previous is None or isinstance(previous, (LeftParenToken, OperatorToken)))
        )

        if is_unary:
            following: Optional[Token] = tokens[i + 1] if i + 1 < len(tokens) else None
            if isinstance(following, NumberToken):
                result.append(
                    NumberToken(value=-following.value, text="-" + following.text, position=token.position)
                )
                i += 2
                continue
            result.append(NumberToken(value=0.0, text="0", position=token.position))

        result.append(token)
        i += 1

    return result


def validate(tokens: List[Token]) -> None:
    """
    Reject operator placements no binary operator can satisfy.

    Must run after ``resolve_unary_minus``, otherwise "10 - -5" would be reported
    as consecutive operators.

    :param List[Token] tokens: Tokens with unary minus resolved

    :raises MalformedExpressionError: On consecutive operators, or a leading or trailing operator
    """
    for current, following in zip(tokens, tokens[1:]):
        if isinstance(current, OperatorToken) and isinstance(following, OperatorToken):
            raise MalformedExpressionError(
                f"Invalid expression: consecutive operators '{current.symbol}' and '{following.symbol}'"
            )

    if tokens and isinstance(tokens[-1], OperatorToken):
        raise MalformedExpressionError("Expression cannot end with an operator")

    if tokens and isinstance(tokens[0], OperatorToken):
        raise MalformedExpressionError(f"Expression cannot start with operator '{tokens[0].symbol}'")


def tokenize(expression: str) -> List[Token]:
    """
    Turn expression text into validated infix tokens.

    :param str expression: Raw expression text, e.g. "2+3×4"

    :return: Infix tokens ready for the Shunting-yard conversion
    :rtype: List[Token]
    :raises ExpressionError: On lexical or operator-placement errors
    """
    tokens = resolve_unary_minus(scan(expression))
    validate(tokens)
    return tokens
