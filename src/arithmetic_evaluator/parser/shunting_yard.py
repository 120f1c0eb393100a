"""Infix to Reverse Polish Notation conversion (Shunting-yard)."""
from typing import List, Sequence

from arithmetic_evaluator.common.errors import MismatchedParenthesesError
from arithmetic_evaluator.common.operators import PRECEDENCE, Associativity, Operator
from arithmetic_evaluator.parser.tokenizer import (
    LeftParenToken,
    NumberToken,
    OperatorToken,
    RightParenToken,
    Token,
)


def _pops_before(stacked: Operator, incoming: Operator) -> bool:
    """
    Whether the operator on top of the stack must be output before pushing ``incoming``.

    :param Operator stacked: Operator on top of the stack
    :param Operator incoming: Operator being pushed

    :return: True for strictly higher precedence, or equal precedence with a left-associative ``incoming``
    :rtype: bool
    """
    stacked_info = PRECEDENCE[stacked]
    incoming_info = PRECEDENCE[incoming]
    if stacked_info.precedence > incoming_info.precedence:
        return True
    return (
        stacked_info.precedence == incoming_info.precedence
        and incoming_info.associativity is Associativity.LEFT
    )


def to_rpn(tokens: Sequence[Token]) -> List[Token]:
    """
    Convert infix tokens into Reverse Polish Notation (RPN) using the Shunting-yard algorithm.

    Examples:
        - "2 + 3 × 4" -> 2 3 4 × +
        - "(2 + 3) × 4" -> 2 3 + 4 ×
        - "2 ^ 3 ^ 2" -> 2 3 2 ^ ^ (right-associative)

    :param Sequence[Token] tokens: Validated infix tokens

    :return: Tokens in RPN order, without parentheses
    :rtype: List[Token]
    :raises MismatchedParenthesesError: If parentheses are unbalanced
    """
    output: List[Token] = []
    stack: List[Token] = []

    for token in tokens:
        if isinstance(token, NumberToken):
            output.append(token)
        elif isinstance(token, OperatorToken):
            while (
                stack
                and isinstance(stack[-1], OperatorToken)
                and _pops_before(stack[-1].operator, token.operator)
            ):
                output.append(stack.pop())
            stack.append(token)
        elif isinstance(token, LeftParenToken):
            stack.append(token)
        elif isinstance(token, RightParenToken):
            while stack and not isinstance(stack[-1], LeftParenToken):
                output.append(stack.pop())
            if not stack:
                raise MismatchedParenthesesError()
            # Discard the matching "("
            stack.pop()

    while stack:
        token = stack.pop()
        if isinstance(token, (LeftParenToken, RightParenToken)):
            raise MismatchedParenthesesError()
        output.append(token)

    return output
