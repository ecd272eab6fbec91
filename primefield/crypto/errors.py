"""Exceptions raised by field arithmetic.

Every error here is a programmer / protocol error.  Nothing inside
primefield catches them; callers that want graceful degradation must
validate operands (same field, non-zero divisor, prime modulus) first.
"""

from __future__ import annotations


class FieldError(Exception):
    """Base class for all primefield errors."""


class FieldMismatchError(FieldError, ValueError):
    """A binary operation was given elements of two different fields."""

    def __init__(self, op: str, left_modulus: int, right_modulus: int) -> None:
        self.op = op
        self.left_modulus = left_modulus
        self.right_modulus = right_modulus
        super().__init__(
            f"Cannot {op} elements of different fields: "
            f"F_{left_modulus} vs F_{right_modulus}"
        )


class DivisionByZeroError(FieldError, ZeroDivisionError):
    """Zero has no multiplicative inverse."""


class InvalidModulusError(FieldError, ValueError):
    """Modulus is not prime."""


class ValueOutOfRangeError(FieldError, ValueError):
    """Value is not a canonical residue of its modulus."""
