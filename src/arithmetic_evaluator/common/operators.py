"""Binary operators understood by the expression parser and their precedence table."""
from enum import Enum
from types import MappingProxyType
from typing import Mapping, NamedTuple


class Operator(str, Enum):
    """Binary operators, valued by their canonical display symbol."""

    ADD = "+"
    SUBTRACT = "−"
    MULTIPLY = "×"
    DIVIDE = "÷"
    POWER = "^"
    MODULO = "mod"


class Associativity(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class OperatorInfo(NamedTuple):
    precedence: int
    associativity: Associativity


# Every accepted spelling, including the ASCII aliases typed on a keyboard
SYMBOLS: Mapping[str, Operator] = MappingProxyType(
    {
        "+": Operator.ADD,
        "−": Operator.SUBTRACT,
        "-": Operator.SUBTRACT,
        "×": Operator.MULTIPLY,
        "*": Operator.MULTIPLY,
        "÷": Operator.DIVIDE,
        "/": Operator.DIVIDE,
        "^": Operator.POWER,
        "mod": Operator.MODULO,
    }
)

# Higher number binds tighter; "^" is the only right-associative operator
PRECEDENCE: Mapping[Operator, OperatorInfo] = MappingProxyType(
    {
        Operator.ADD: OperatorInfo(1, Associativity.LEFT),
        Operator.SUBTRACT: OperatorInfo(1, Associativity.LEFT),
        Operator.MULTIPLY: OperatorInfo(2, Associativity.LEFT),
        Operator.DIVIDE: OperatorInfo(2, Associativity.LEFT),
        Operator.MODULO: OperatorInfo(2, Associativity.LEFT),
        Operator.POWER: OperatorInfo(3, Associativity.RIGHT),
    }
)
