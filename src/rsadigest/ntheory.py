"""Small number-theoretic helpers that the builtin `int` does not provide directly.

Python integers already give us arbitrary precision, `pow` with a modulus (and with a negative exponent for inverses)
and `math.gcd`, so only the Jacobi symbol is implemented by hand here.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rsadigest.errors import ArithmeticInvariantViolation
from rsadigest.errors import InvalidArgument


def jacobi(a: int, n: int) -> int:
    """Computes the Jacobi symbol (a/n).

    Uses the binary algorithm based on quadratic reciprocity, pulling out factors of two and flipping the sign
    according to the residue of `n` modulo 8.

    Args:
        a: Any integer, reduced modulo `n` first.
        n: A positive odd integer.

    Returns:
        One of -1, 0 or 1.

    Raises:
        InvalidArgument: If `n` is not a positive odd integer.
    """
    if n <= 0 or n % 2 == 0:
        raise InvalidArgument("Jacobi symbol is only defined for positive odd n.")
    a %= n
    result = 1
    while a != 0:
        while a % 2 == 0:
            a //= 2
            if n % 8 in (3, 5):
                result = -result
        a, n = n, a
        if a % 4 == 3 and n % 4 == 3:
            result = -result
        a %= n
    return result if n == 1 else 0


def invert(a: int, m: int) -> int:
    """Modular multiplicative inverse of `a` modulo `m`.

    Args:
        a: The value to invert.
        m: The modulus.

    Returns:
        `x` in `[0, m)` such that `a*x = 1 (mod m)`.

    Raises:
        ArithmeticInvariantViolation: If `a` and `m` are not coprime.
    """
    try:
        return pow(a, -1, m)
    except ValueError as err:
        raise ArithmeticInvariantViolation(f"{a} is not invertible modulo {m}.") from err
