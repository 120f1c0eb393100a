"""Parse and evaluate arithmetic expressions safely."""
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from arithmetic_evaluator.common.errors import ExpressionError
from arithmetic_evaluator.common.logger import logger
from arithmetic_evaluator.common.models import CalculationResult, Error, Success
from arithmetic_evaluator.engine.calculator import CalculatorEngine
from arithmetic_evaluator.parser.postfix import evaluate_rpn
from arithmetic_evaluator.parser.shunting_yard import to_rpn
from arithmetic_evaluator.parser.tokenizer import (
    LeftParenToken,
    NumberToken,
    OperatorToken,
    Token,
    tokenize,
)


class ExpressionParser(BaseModel):
    """
    Parse and evaluate arithmetic expressions with standard operator precedence.

    Design constraints:
        - No eval(), no dynamic code execution
        - No state between calls: the same text always gives the same result
        - Errors are returned as ``Error`` results, never raised

    Algorithm:
        1. Tokenize (numbers, operators, parentheses), resolve unary minus, validate placement
        2. Convert to Reverse Polish Notation (RPN) using Shunting-yard
        3. Evaluate RPN using a stack and the calculator engine

    Examples:
        - "2+3×4" -> 14
        - "(2+3)×4" -> 20
        - "2^3^2" -> 512
    """

    # Make the Pydantic instance immutable (read-only), so one parser can be shared freely
    model_config = ConfigDict(frozen=True)

    engine: CalculatorEngine = Field(
        default_factory=CalculatorEngine, description="Engine performing the arithmetic"
    )

    @staticmethod
    def tokenize(expr: str) -> List[Token]:
        """
        Split an expression into validated infix tokens.

        :param str expr: Arithmetic expression as a string

        :return: List of tokens
        :rtype: List[Token]
        :raises ExpressionError: If the expression contains invalid characters or misplaced operators
        """
        return tokenize(expr)

    @staticmethod
    def to_rpn(tokens: List[Token]) -> List[Token]:
        """
        Convert infix tokens into Reverse Polish Notation.

        :param List[Token] tokens: Validated infix tokens

        :return: List of tokens in RPN order
        :rtype: List[Token]
        :raises MismatchedParenthesesError: If parentheses are unbalanced
        """
        return to_rpn(tokens)

    def evaluate(self, expr: str) -> CalculationResult:
        """
        Evaluate an arithmetic expression.

        Empty or whitespace-only input evaluates to 0.

        :param str expr: Arithmetic expression string

        :return: Success with the computed value, or Error with the first problem found
        :rtype: CalculationResult
        """
        if not expr.strip():
            return Success(value=0.0)

        try:
            tokens: List[Token] = self.tokenize(expr)
            rpn: List[Token] = self.to_rpn(tokens)
        except ExpressionError as exc:
            logger.info("Rejected expression %r: %s", expr, exc)
            return Error(message=str(exc))

        logger.debug("RPN for %r: %s", expr, " ".join(_describe(token) for token in rpn))

        result: CalculationResult = evaluate_rpn(rpn, self.engine)
        if isinstance(result, Error):
            logger.info("Could not evaluate %r: %s", expr, result.message)
        return result


def _describe(token: Token) -> str:
    if isinstance(token, NumberToken):
        return token.text
    if isinstance(token, OperatorToken):
        return token.symbol
    return "(" if isinstance(token, LeftParenToken) else ")"


# Shared parser with the default engine; immutable, so safe across threads
DEFAULT_PARSER: ExpressionParser = ExpressionParser()


def evaluate(expression: str) -> CalculationResult:
    """
    Evaluate an arithmetic expression with the default parser.

    :param str expression: Arithmetic expression, e.g. "2+3×4"

    :return: Success with the computed value, or Error with a message
    :rtype: CalculationResult
    """
    return DEFAULT_PARSER.evaluate(expression)
