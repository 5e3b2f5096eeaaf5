"""Integer arithmetic used by the calculators."""


def add(a: int, b: int) -> int:
    """Add two integers."""
    return a + b


def subtract(a: int, b: int) -> int:
    """Subtract b from a."""
    return a - b


def multiply(a: int, b: int) -> int:
    """Multiply two integers."""
    return a * b


def divide(a: int, b: int) -> int:
    """Divide a by b, truncating toward zero.

    Raises ZeroDivisionError if b is zero.
    """
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(a) // abs(b)
    # // floors, so take the sign only after dividing magnitudes
    return -quotient if (a < 0) != (b < 0) else quotient
