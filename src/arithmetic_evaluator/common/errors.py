"""Exceptions raised while turning expression text into postfix tokens."""


class ExpressionError(ValueError):
    """Base class for every lexical or structural error in an expression."""


class InvalidCharacterError(ExpressionError):
    """Raised when the tokenizer meets a character it does not recognize."""

    def __init__(self, character: str, position: int):
        super().__init__(f"Invalid character: {character}")
        self.character = character
        self.position = position


class InvalidNumberError(ExpressionError):
    """Raised when an accumulated numeric literal cannot be read as a float."""

    def __init__(self, text: str):
        super().__init__(f"Invalid number: {text}")
        self.text = text


class MalformedExpressionError(ExpressionError):
    """Raised for misplaced operators (consecutive, leading or trailing)."""


class MismatchedParenthesesError(ExpressionError):
    """Raised when opening and closing parentheses do not pair up."""

    def __init__(self) -> None:
        super().__init__("Mismatched parentheses")
