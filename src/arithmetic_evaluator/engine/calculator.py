"""Elementary and scientific math operations guarded against domain errors."""
import math
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field

from arithmetic_evaluator.common.models import CalculationResult, Error, Success


def _checked(compute: Callable[[], float], message: str) -> CalculationResult:
    """
    Run a computation and turn any non-finite outcome into an error result.

    ``math`` raises instead of returning Infinity/NaN for some inputs
    (``math.exp(1000)``, ``math.pow(0, -1)``); both paths end in the same error.

    :param Callable compute: Zero-argument function producing the value
    :param str message: Error message used when the value is not finite

    :return: Success with the value, or Error with ``message``
    :rtype: CalculationResult
    """
    try:
        value: float = compute()
    except (OverflowError, ValueError, ZeroDivisionError):
        return Error(message=message)
    if not math.isfinite(value):
        return Error(message=message)
    return Success(value=value)


class CalculatorEngine(BaseModel):
    """
    Stateless numeric operations used by the expression parser and by button-driven front ends.

    Every operation returns a ``CalculationResult``: ``Success`` with a finite value,
    or ``Error`` describing why the input is outside the operation's domain.
    Zero checks compare against ``epsilon`` instead of exact equality.
    """

    # Immutable configuration, safe to share between threads
    model_config = ConfigDict(frozen=True)

    epsilon: float = Field(default=1e-15, gt=0, description="Tolerance for 'effectively zero' checks")

    def _is_zero(self, value: float) -> bool:
        return abs(value) < self.epsilon

    # Basic arithmetic

    def add(self, a: float, b: float) -> CalculationResult:
        return _checked(lambda: a + b, "Invalid result")

    def subtract(self, a: float, b: float) -> CalculationResult:
        return _checked(lambda: a - b, "Invalid result")

    def multiply(self, a: float, b: float) -> CalculationResult:
        return _checked(lambda: a * b, "Invalid result")

    def divide(self, a: float, b: float) -> CalculationResult:
        """
        Divide ``a`` by ``b``.

        :param float a: Dividend
        :param float b: Divisor

        :return: Quotient, or an error when ``b`` is effectively zero
        :rtype: CalculationResult
        """
        if self._is_zero(b):
            return Error(message="Division by zero")
        return _checked(lambda: a / b, "Invalid result")

    def mod(self, a: float, b: float) -> CalculationResult:
        """
        Remainder of ``a / b`` with the sign of the dividend (``7 mod -3 == 1``, ``-7 mod 3 == -1``).

        :param float a: Dividend
        :param float b: Divisor

        :return: Remainder, or an error when ``b`` is effectively zero
        :rtype: CalculationResult
        """
        if self._is_zero(b):
            return Error(message="Division by zero")
        return _checked(lambda: math.fmod(a, b), "Invalid result")

    def negate(self, value: float) -> CalculationResult:
        return _checked(lambda: -value, "Invalid result")

    # Extended functions

    def percentage(self, value: float, percent: float) -> CalculationResult:
        """``percent`` percent of ``value``."""
        return _checked(lambda: value * percent / 100, "Invalid result")

    def square_root(self, value: float) -> CalculationResult:
        if value < 0:
            return Error(message="Square root of negative number")
        return _checked(lambda: math.sqrt(value), "Invalid result")

    def square(self, value: float) -> CalculationResult:
        return _checked(lambda: value * value, "Invalid result")

    def reciprocal(self, value: float) -> CalculationResult:
        if self._is_zero(value):
            return Error(message="Division by zero")
        return _checked(lambda: 1 / value, "Invalid result")

    def absolute(self, value: float) -> CalculationResult:
        return _checked(lambda: abs(value), "Invalid result")

    # Powers and roots

    def power(self, base: float, exponent: float) -> CalculationResult:
        """
        Raise ``base`` to ``exponent``.

        Fails with "Invalid result" when the real result does not exist or is not
        representable: ``(-8) ^ 0.5``, ``0 ^ -1``, ``10 ^ 400``.

        :param float base: Base
        :param float exponent: Exponent

        :return: Power, or an error for NaN/Infinity outcomes
        :rtype: CalculationResult
        """
        return _checked(lambda: math.pow(base, exponent), "Invalid result")

    def cube(self, value: float) -> CalculationResult:
        return _checked(lambda: value * value * value, "Invalid result")

    def cube_root(self, value: float) -> CalculationResult:
        return _checked(lambda: math.cbrt(value), "Invalid result")

    def nth_root(self, value: float, n: float) -> CalculationResult:
        """
        The ``n``-th root of ``value``.

        Odd roots of negative numbers return the negative real root (``nth_root(-8, 3) == -2``).

        :param float value: Radicand
        :param float n: Root exponent

        :return: Root, or an error for a zero exponent or an even root of a negative number
        :rtype: CalculationResult
        """
        if self._is_zero(n):
            return Error(message="Root exponent cannot be zero")
        if value < 0 and math.fmod(n, 2) == 0:
            return Error(message="Even root of negative number")
        if value < 0:
            return _checked(lambda: -math.pow(-value, 1 / n), "Invalid result")
        return _checked(lambda: math.pow(value, 1 / n), "Invalid result")

    def exp(self, value: float) -> CalculationResult:
        """e raised to ``value``."""
        return _checked(lambda: math.exp(value), "Overflow")

    def exp10(self, value: float) -> CalculationResult:
        """10 raised to ``value``."""
        return _checked(lambda: math.pow(10, value), "Overflow")

    def factorial(self, n: int) -> CalculationResult:
        """
        ``n!`` computed in floating point.

        :param int n: Non-negative whole number

        :return: Factorial, or an error for negative, fractional or overflowing input
        :rtype: CalculationResult
        """
        if n < 0:
            return Error(message="Factorial of negative number")
        if isinstance(n, float) and not n.is_integer():
            return Error(message="Factorial only for whole numbers")
        # 171! is the first factorial beyond the float range
        if n > 170:
            return Error(message="Overflow")

        result: float = 1.0
        for i in range(2, int(n) + 1):
            result *= i
        return Success(value=result)

    # Logarithms

    def log10(self, value: float) -> CalculationResult:
        if value <= 0:
            return Error(message="Logarithm only for positive numbers")
        return _checked(lambda: math.log10(value), "Invalid result")

    def ln(self, value: float) -> CalculationResult:
        if value <= 0:
            return Error(message="Logarithm only for positive numbers")
        return _checked(lambda: math.log(value), "Invalid result")

    # Trigonometry (radians)

    def sin(self, radians: float) -> CalculationResult:
        return _checked(lambda: math.sin(radians), "Invalid result")

    def cos(self, radians: float) -> CalculationResult:
        return _checked(lambda: math.cos(radians), "Invalid result")

    def tan(self, radians: float) -> CalculationResult:
        """Tangent; undefined where the cosine is effectively zero (odd multiples of pi/2)."""
        if self._is_zero(math.cos(radians)):
            return Error(message="Tangent undefined")
        return _checked(lambda: math.tan(radians), "Invalid result")

    def asin(self, value: float) -> CalculationResult:
        if value < -1 or value > 1:
            return Error(message="Value must be between -1 and 1")
        return _checked(lambda: math.asin(value), "Invalid result")

    def acos(self, value: float) -> CalculationResult:
        if value < -1 or value > 1:
            return Error(message="Value must be between -1 and 1")
        return _checked(lambda: math.acos(value), "Invalid result")

    def atan(self, value: float) -> CalculationResult:
        return _checked(lambda: math.atan(value), "Invalid result")

    # Hyperbolic functions

    def sinh(self, value: float) -> CalculationResult:
        return _checked(lambda: math.sinh(value), "Invalid result")

    def cosh(self, value: float) -> CalculationResult:
        return _checked(lambda: math.cosh(value), "Invalid result")

    def tanh(self, value: float) -> CalculationResult:
        return _checked(lambda: math.tanh(value), "Invalid result")

    # Constants and conversions

    @property
    def pi(self) -> float:
        return math.pi

    @property
    def e(self) -> float:
        return math.e

    def degrees_to_radians(self, degrees: float) -> CalculationResult:
        return _checked(lambda: degrees * math.pi / 180, "Invalid result")

    def radians_to_degrees(self, radians: float) -> CalculationResult:
        return _checked(lambda: radians * 180 / math.pi, "Invalid result")
