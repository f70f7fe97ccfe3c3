"""Core Key Generation Utility, focusing on the generation of random primes and the exponent pair.

This module hosts the number-theoretic core of the key generation: a Solovay-Strassen primality test, the generator
for a prime pair whose product has an exact bit-length, and the derivation of the public/private exponents.

Every sampling call goes through an explicit random generator handle (anything offering `getrandbits` and
`randrange`, like `random.Random`). When none is given a fresh `secrets.SystemRandom` is used, seeded generators are
meant for reproducible tests only.

Typical usage example:

    n, p, q = generate_n_p_q(1024)
    e, d = generate_e_d(p, q)
    is_probable_prime(104729)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math
import random
import secrets
import warnings

from rsadigest import ntheory
from rsadigest.errors import ArithmeticInvariantViolation
from rsadigest.errors import GenerationExhausted
from rsadigest.errors import InvalidArgument

PRIMALITY_TEST_ACCURACY: int = 20
PUBLIC_EXPONENT: int = 65537
MINIMUM_KEY_LENGTH: int = 10


def _get_rng(rng: random.Random | None) -> random.Random:
    if rng is None:
        return secrets.SystemRandom()
    return rng


def _is_integer(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_probable_prime(n: int, rounds: int = PRIMALITY_TEST_ACCURACY, rng: random.Random | None = None) -> bool:
    """Perform the Solovay-Strassen primality test.

    For every round a witness `a` is drawn uniformly from `[2, n - 2]` and Euler's criterion
    `a**((n - 1) / 2) = (a/n) (mod n)` is checked against the Jacobi symbol.

    Warning! The loop reports "prime" as soon as a single round passes, it does not require every round to pass.
    One Euler liar is therefore enough for a composite to be accepted, which is weaker than the textbook test.
    Composites are only reported once every round has failed.

    Args:
        n: The candidate to test.
        rounds: Number of rounds to attempt. Defaults to `PRIMALITY_TEST_ACCURACY`.
        rng: Random generator handle used to draw witnesses. Defaults to a `secrets.SystemRandom`.

    Returns:
        True if `n` is probably prime, False otherwise.

    Raises:
        InvalidArgument: If `n` is None or not an integer, or `rounds` is negative.
    """
    if not _is_integer(n):
        raise InvalidArgument("Candidate must be an integer.")
    if not _is_integer(rounds) or rounds < 0:
        raise InvalidArgument("Rounds must be a non-negative integer.")
    if n <= 1:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    rng = _get_rng(rng)
    for _ in range(rounds):
        # n = 3 has the single witness 2.
        a = rng.randrange(max(n - 3, 1)) + 2
        j = ntheory.jacobi(a, n)
        x = n - 1 if j == -1 else j
        if x != 0 and pow(a, (n - 1) // 2, n) == x:
            return True
    return False


def _random_bitlen(bits: int, rng: random.Random) -> int:
    """Draws a random integer of exactly `bits` bits, by forcing the top bit."""
    return rng.getrandbits(bits) | (1 << (bits - 1))


def _refine_prime(bits: int, rng: random.Random, exclude: int | None = None) -> int:
    """Resamples `bits`-bit candidates until one is accepted by the primality test."""
    while True:
        candidate = _random_bitlen(bits, rng)
        if candidate == exclude:
            continue
        if is_probable_prime(candidate, PRIMALITY_TEST_ACCURACY, rng):
            return candidate


def generate_n_p_q(target_bitlen: int,
                   rng: random.Random | None = None,
                   max_attempts: int | None = None) -> tuple[int, int, int]:
    """Generates a modulus and its two prime factors.

    Runs in two phases. First two random `target_bitlen / 2` bit numbers are multiplied and the product is checked for
    the right magnitude, which cheaply throws away unlucky draws. Then `p` and `q` are resampled independently until
    each passes the primality test, and the product is checked again, as the resampling may have moved it out of
    range. If it did, everything is discarded and the outer loop starts over.

    Args:
        target_bitlen: The bit-length of the modulus. Must be even and at least `MINIMUM_KEY_LENGTH`.
        rng: Random generator handle used for all sampling. Defaults to a `secrets.SystemRandom`.
        max_attempts: Optional cap on outer loop iterations. Defaults to None, i.e. loop until success.

    Returns:
        Tuple of (n, p, q) where `n = p * q` has exactly `target_bitlen` bits and `p != q`.

    Raises:
        InvalidArgument: If `target_bitlen` is not an even integer of at least `MINIMUM_KEY_LENGTH`, or `max_attempts`
            is not positive.
        GenerationExhausted: If `max_attempts` outer iterations passed with no suitable pair.
    """
    if not _is_integer(target_bitlen) or target_bitlen <= 0:
        raise InvalidArgument("Key length must be a positive integer.")
    if target_bitlen % 2 != 0:
        raise InvalidArgument("Key length must be an even number.")
    if target_bitlen < MINIMUM_KEY_LENGTH:
        # Shorter moduli cannot hold every byte value, 2 and 4 bits are not even reachable with distinct primes.
        raise InvalidArgument(f"Key length must be at least {MINIMUM_KEY_LENGTH}.")
    if max_attempts is not None and (not _is_integer(max_attempts) or max_attempts <= 0):
        raise InvalidArgument("Attempt cap must be a positive integer.")
    rng = _get_rng(rng)
    half = target_bitlen // 2
    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        attempts += 1
        p = _random_bitlen(half, rng)
        q = _random_bitlen(half, rng)
        if (p * q).bit_length() != target_bitlen:
            continue
        p = _refine_prime(half, rng)
        q = _refine_prime(half, rng, exclude=p)
        n = p * q
        if n.bit_length() == target_bitlen:
            return n, p, q
    raise GenerationExhausted(f"No {target_bitlen} bit modulus found in {max_attempts} attempts.")


def generate_e_d(p: int, q: int) -> tuple[int, int]:
    """Generates the public and private exponents for a prime pair.

    The public exponent is fixed to 65537. The private exponent is its inverse modulo `(p - 1)(q - 1)`.

    Args:
        p: The first prime.
        q: The second prime.

    Returns:
        Tuple of (e, d).

    Raises:
        InvalidArgument: If `p` or `q` is not an integer greater than 1.
        ArithmeticInvariantViolation: If `e` is not coprime to phi.
    """
    if not _is_integer(p) or not _is_integer(q) or p < 2 or q < 2:
        raise InvalidArgument("Both primes must be integers greater than 1.")
    phi = (p - 1) * (q - 1)
    e = PUBLIC_EXPONENT
    if math.gcd(e, phi) != 1:
        raise ArithmeticInvariantViolation(f"Public exponent {e} is not coprime to phi.")
    d = ntheory.invert(e, phi)
    if (e * d) % phi != 1:
        # Not fatal, the pair is still handed back.
        warnings.warn("Exponent consistency check (e * d) % phi == 1 failed!", RuntimeWarning)
    return e, d
