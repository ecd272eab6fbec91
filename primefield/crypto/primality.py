"""Miller-Rabin primality test.

Used to validate moduli handed to the checked constructors.  Below
``MILLER_RABIN_DETERMINISTIC_LIMIT`` the fixed witness set gives an exact
answer; above it random witnesses are added and the answer is
probabilistic (error < 4**-rounds).
"""

from __future__ import annotations

import logging
import secrets

from primefield.config import (
    MILLER_RABIN_BASES,
    MILLER_RABIN_DETERMINISTIC_LIMIT,
    MILLER_RABIN_EXTRA_ROUNDS,
    SMALL_PRIMES,
)
from primefield.crypto.modpow import mod_pow

log = logging.getLogger(__name__)


def is_prime(n: int) -> bool:
    """Return True if *n* is prime."""
    if n < 2:
        return False
    for p in SMALL_PRIMES:
        if n == p:
            return True
        if n % p == 0:
            return False

    # n - 1 = d * 2**s with d odd
    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1

    witnesses = list(MILLER_RABIN_BASES)
    if n >= MILLER_RABIN_DETERMINISTIC_LIMIT:
        log.debug("n has %d bits, adding %d random witnesses", n.bit_length(), MILLER_RABIN_EXTRA_ROUNDS)
        witnesses += [2 + secrets.randbelow(n - 3) for _ in range(MILLER_RABIN_EXTRA_ROUNDS)]
    return not any(_is_composite_witness(a, d, s, n) for a in witnesses)


def _is_composite_witness(a: int, d: int, s: int, n: int) -> bool:
    """True if *a* proves *n* composite."""
    x = mod_pow(a, d, n)
    if x == 1 or x == n - 1:
        return False
    for _ in range(s - 1):
        x = (x * x) % n
        if x == n - 1:
            return False
    return True
