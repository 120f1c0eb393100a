"""Stack evaluation of Reverse Polish Notation tokens."""
from typing import Callable, List, Mapping, Sequence

from arithmetic_evaluator.common.logger import logger
from arithmetic_evaluator.common.models import CalculationResult, Error, Success
from arithmetic_evaluator.common.operators import Operator
from arithmetic_evaluator.engine.calculator import CalculatorEngine
from arithmetic_evaluator.parser.tokenizer import NumberToken, OperatorToken, Token


# Engine method applied to (a, b) for each operator
OperatorFn = Callable[[CalculatorEngine, float, float], CalculationResult]

OPERATIONS: Mapping[Operator, OperatorFn] = {
    Operator.ADD: CalculatorEngine.add,
    Operator.SUBTRACT: CalculatorEngine.subtract,
    Operator.MULTIPLY: CalculatorEngine.multiply,
    Operator.DIVIDE: CalculatorEngine.divide,
    Operator.POWER: CalculatorEngine.power,
    Operator.MODULO: CalculatorEngine.mod,
}


def evaluate_rpn(postfix: Sequence[Token], engine: CalculatorEngine) -> CalculationResult:
    """
    Evaluate RPN tokens with a value stack.

    Each operator pops its right operand first, then its left one, and applies
    the matching engine operation. The first error result is returned as is.

    :param Sequence[Token] postfix: Tokens in RPN order
    :param CalculatorEngine engine: Engine providing the arithmetic

    :return: The single remaining value, or the first error encountered
    :rtype: CalculationResult
    """
    stack: List[float] = []

    for token in postfix:
        if isinstance(token, NumberToken):
            stack.append(token.value)
        elif isinstance(token, OperatorToken):
            if len(stack) < 2:
                return Error(message="Invalid expression")
            b: float = stack.pop()
            a: float = stack.pop()
            result: CalculationResult = OPERATIONS[token.operator](engine, a, b)
            if isinstance(result, Error):
                logger.debug("%s %s %s failed: %s", a, token.symbol, b, result.message)
                return result
            stack.append(result.value)
        else:
            # Parentheses never survive the Shunting-yard conversion
            return Error(message="Invalid expression")

    if len(stack) != 1:
        return Error(message="Invalid expression")

    return Success(value=stack[0])
