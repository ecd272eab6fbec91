"""Prime-field arithmetic F_p.

A ``FieldElement`` is an immutable ``(value, modulus)`` pair.  Every
operation returns a new element whose value is reduced into
[0, modulus); operands are never mutated.

The plain constructor trusts the caller: it does not check that the
modulus is prime or that the value is already reduced.  Arithmetic on
such elements is undefined (division in particular relies on Fermat's
little theorem).  Use ``FieldElement.checked`` or ``PrimeField`` when the
inputs come from outside.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from primefield.crypto.errors import (
    DivisionByZeroError,
    FieldMismatchError,
    InvalidModulusError,
    ValueOutOfRangeError,
)
from primefield.crypto.modpow import mod_inv, mod_pow
from primefield.crypto.primality import is_prime

log = logging.getLogger(__name__)


class FieldElement(BaseModel):
    """One residue of Z/pZ."""

    model_config = ConfigDict(frozen=True, strict=True)

    value: int
    modulus: int

    def __init__(self, value: int, modulus: int, **data: Any) -> None:
        super().__init__(value=value, modulus=modulus, **data)

    @field_validator("value")
    @classmethod
    def _value_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"value must be non-negative, got {v}")
        return v

    @field_validator("modulus")
    @classmethod
    def _modulus_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"modulus must be >= 1, got {v}")
        return v

    @classmethod
    def checked(cls, value: int, modulus: int) -> FieldElement:
        """Build an element, rejecting a non-prime modulus or unreduced value."""
        element = cls(value, modulus)
        if not is_prime(modulus):
            log.debug("rejecting non-prime modulus %d", modulus)
            raise InvalidModulusError(f"Modulus {modulus} is not prime")
        if value >= modulus:
            log.debug("rejecting value %d outside F_%d", value, modulus)
            raise ValueOutOfRangeError(f"Value {value} not in range [0, {modulus})")
        return element

    # ---------- field operations ----------

    def _same_field(self, other: FieldElement, op: str) -> None:
        if not isinstance(other, FieldElement):
            raise TypeError(f"Cannot {op} FieldElement and {type(other).__name__}")
        if self.modulus != other.modulus:
            log.debug("%s across fields F_%d and F_%d", op, self.modulus, other.modulus)
            raise FieldMismatchError(op, self.modulus, other.modulus)

    def add(self, other: FieldElement) -> FieldElement:
        """Field addition."""
        self._same_field(other, "add")
        return FieldElement((self.value + other.value) % self.modulus, self.modulus)

    def sub(self, other: FieldElement) -> FieldElement:
        """Field subtraction.

        The modulus is added before reducing so the result is the
        non-negative residue even when ``self.value < other.value``.
        """
        self._same_field(other, "subtract")
        return FieldElement((self.value + self.modulus - other.value) % self.modulus, self.modulus)

    def mul(self, other: FieldElement) -> FieldElement:
        """Field multiplication."""
        self._same_field(other, "multiply")
        return FieldElement((self.value * other.value) % self.modulus, self.modulus)

    def div(self, other: FieldElement) -> FieldElement:
        """Field division: multiply by the Fermat inverse of *other*."""
        self._same_field(other, "divide")
        if other.value == 0:
            log.debug("division by zero in F_%d", self.modulus)
            raise DivisionByZeroError(f"Cannot divide by zero in F_{self.modulus}")
        return FieldElement((self.value * mod_inv(other.value, self.modulus)) % self.modulus, self.modulus)

    def pow(self, exponent: int) -> FieldElement:
        """Raise to a non-negative integer power.

        The exponent is used as given, not reduced modulo ``modulus - 1``.
        """
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError(f"Exponent must be an int, got {type(exponent).__name__}")
        if exponent < 0:
            raise ValueError(f"Exponent must be non-negative, got {exponent}")
        return FieldElement(mod_pow(self.value, exponent, self.modulus), self.modulus)

    def neg(self) -> FieldElement:
        """Additive inverse."""
        return FieldElement((self.modulus - self.value) % self.modulus, self.modulus)

    def inverse(self) -> FieldElement:
        """Multiplicative inverse via Fermat's little theorem (p is prime)."""
        return FieldElement(mod_inv(self.value, self.modulus), self.modulus)

    def is_zero(self) -> bool:
        return self.value % self.modulus == 0

    # ---------- operators ----------

    def __add__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: object) -> FieldElement:
        # 0 + x, so sum() works without a start value
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.mul(other)

    def __rmul__(self, coefficient: object) -> FieldElement:
        # k * x with a plain integer coefficient
        if isinstance(coefficient, bool) or not isinstance(coefficient, int):
            return NotImplemented
        return FieldElement((coefficient * self.value) % self.modulus, self.modulus)

    def __truediv__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.div(other)

    def __pow__(self, exponent: int) -> FieldElement:
        return self.pow(exponent)

    def __neg__(self) -> FieldElement:
        return self.neg()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self.value == other.value and self.modulus == other.modulus

    def __hash__(self) -> int:
        return hash((self.value, self.modulus))

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"FieldElement_{self.modulus}({self.value})"


class PrimeField:
    """F_p for one fixed modulus.

    ``F = PrimeField(31); F(-1)`` gives ``FieldElement_31(30)``: any int is
    reduced into range on the way in.
    """

    def __init__(self, modulus: int, *, check: bool = True) -> None:
        FieldElement(0, modulus)  # same type and range validation as the element
        if check and not is_prime(modulus):
            raise InvalidModulusError(f"Modulus {modulus} is not prime")
        self.modulus = modulus

    def __call__(self, value: int) -> FieldElement:
        return FieldElement(value % self.modulus, self.modulus)

    def zero(self) -> FieldElement:
        return self(0)

    def one(self) -> FieldElement:
        return self(1)

    def __contains__(self, element: object) -> bool:
        return (
            isinstance(element, FieldElement)
            and element.modulus == self.modulus
            and element.value < self.modulus
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrimeField):
            return NotImplemented
        return self.modulus == other.modulus

    def __hash__(self) -> int:
        return hash(self.modulus)

    def __repr__(self) -> str:
        return f"PrimeField({self.modulus})"

    def __str__(self) -> str:
        return f"F_{self.modulus}"
