"""Exceptions raised by RSA Digest.

Every exception derives from `RSADigestError` as well as the closest builtin, so callers used to catching `ValueError`,
`RuntimeError` or `IOError` keep working.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class RSADigestError(Exception):
    """Base class for all RSA Digest errors."""


class InvalidArgument(RSADigestError, ValueError):
    """Null, zero or otherwise malformed input to a core operation."""


class ArithmeticInvariantViolation(RSADigestError, ArithmeticError):
    """A mathematical precondition failed, e.g. the public exponent is not invertible modulo phi."""


class GenerationFailure(RSADigestError, RuntimeError):
    """Key assembly failed in one of its sub-steps."""


class GenerationExhausted(GenerationFailure):
    """A caller-imposed attempt cap was reached before a suitable prime pair was found."""


class MalformedToken(RSADigestError, IOError):
    """A ciphertext token could not be read as a hexadecimal integer."""
