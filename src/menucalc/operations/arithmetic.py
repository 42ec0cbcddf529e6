"""Compute functions for every calculator operation."""

import math


# Largest n whose factorial fits in a double
MAX_FACTORIAL = 170


class DomainError(ValueError):
    """Operand outside the valid domain of an operation."""


def add(a: float, b: float) -> float:
    return a + b


def subtract(a: float, b: float) -> float:
    return a - b


def multiply(a: float, b: float) -> float:
    return a * b


def divide(a: float, b: float) -> float:
    """Divide a by b.

    Raises:
        DomainError: If b is zero.
    """
    if b == 0:
        raise DomainError("Division by zero!")
    return a / b


def modulus(a: float, b: float) -> float:
    """Real-valued remainder of a / b, carrying the sign of a.

    Raises:
        DomainError: If b is zero or a is infinite.
    """
    if b == 0:
        raise DomainError("Division by zero in modulus!")
    try:
        return math.fmod(a, b)
    except ValueError:
        raise DomainError("Modulus of an infinite number!") from None


def power(a: float, b: float) -> float:
    """Raise a to the power b.

    Raises:
        DomainError: If the result is undefined or not representable.
    """
    if a == 0 and b < 0:
        raise DomainError("Zero cannot be raised to a negative power!")
    if a < 0 and not float(b).is_integer():
        raise DomainError("Negative base requires an integer exponent!")
    try:
        return math.pow(a, b)
    except OverflowError:
        raise DomainError("Result out of range!") from None


def absolute(a: float) -> float:
    return abs(a)


def square(a: float) -> float:
    return a * a


def square_root(a: float) -> float:
    if a < 0:
        raise DomainError("Square root of negative number!")
    return math.sqrt(a)


def natural_log(a: float) -> float:
    if a <= 0:
        raise DomainError("Logarithm of non-positive number!")
    return math.log(a)


def log10(a: float) -> float:
    if a <= 0:
        raise DomainError("Logarithm of non-positive number!")
    return math.log10(a)


def factorial(a: float) -> float:
    """Product 2..n as a float.

    Overflows to inf past MAX_FACTORIAL, the same as repeated double
    multiplication would.

    Raises:
        DomainError: If a is negative or not a whole number.
    """
    if a < 0 or not float(a).is_integer():
        raise DomainError("Factorial is only defined for non-negative integers!")

    n = int(a)
    if n > MAX_FACTORIAL:
        return math.inf

    result = 1.0
    for i in range(2, n + 1):
        result *= i
    return result
