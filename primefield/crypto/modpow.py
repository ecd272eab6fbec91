"""Modular exponentiation by square-and-multiply.

API
---
mod_pow(base, exponent, modulus)  -> base**exponent mod modulus
mod_inv(value, modulus)           -> value**(modulus-2) mod modulus   (modulus prime)
"""

from __future__ import annotations

import logging

from primefield.crypto.errors import DivisionByZeroError

log = logging.getLogger(__name__)


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Compute ``base ** exponent % modulus`` in O(log exponent) multiplications.

    Exponent bits are consumed least-significant first: multiply the
    accumulator in when the bit is set, then square the base.  In the
    degenerate field of modulus 1 every residue is 0.
    """
    if modulus < 1:
        raise ValueError(f"Modulus must be >= 1, got {modulus}")
    if exponent < 0:
        raise ValueError(f"Exponent must be non-negative, got {exponent}")
    if modulus == 1:
        return 0

    result = 1
    base %= modulus
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        base = (base * base) % modulus
        exponent >>= 1
    return result


def mod_inv(value: int, modulus: int) -> int:
    """Multiplicative inverse via Fermat's little theorem (modulus is prime)."""
    if value % modulus == 0:
        log.debug("refusing to invert zero in F_%d", modulus)
        raise DivisionByZeroError(f"Cannot invert zero in F_{modulus}")
    return mod_pow(value, modulus - 2, modulus)
